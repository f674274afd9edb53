"""Unit test fixtures."""

import pytest

from boxtable import Column


@pytest.fixture
def name_column() -> Column:
    """Name column with a footer and four people."""
    column = Column.builder().header("name").footer("foot1").build()
    column.add_cell("John").add_cell("Jane").add_cell("Bob").add_cell("Alice")
    return column


@pytest.fixture
def comment_column() -> Column:
    """Comment column with a footer and four comments of varying length."""
    column = Column.builder().header("Comment").footer("foot2").build()
    (
        column.add_cell("This is a comment")
        .add_cell("This is another comment")
        .add_cell("This is a third comment")
        .add_cell("This is a fourth comment")
    )
    return column


@pytest.fixture
def narrow_comment_column() -> Column:
    """Comment column fixed at 10 display columns."""
    column = Column.builder().header("Comment").footer("foot2").width(10).build()
    (
        column.add_cell("This is a comment")
        .add_cell("This is another comment")
        .add_cell("This is a third comment")
        .add_cell("This is a fourth comment")
    )
    return column
