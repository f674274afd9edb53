"""Table columns and their fluent builder.

Example:
    name = (
        Column.builder()
        .header("name")
        .footer("3 people")
        .data_align("right")
        .build()
    )
    name.add_cell("John").add_cell("Jane").add_cell("Bob")
"""

from __future__ import annotations

from .exceptions import ConfigurationError
from .models import ELLIPSIS, NULL_CELL, HorizontalAlign, coerce_align
from .width import display_width

CellValue = str | int | float | bool | None


class Column:
    """
    A table column: header, footer, alignments, visibility, width and cells.

    Without an explicit width the column grows to fit its widest text and
    never shrinks. An explicit width stays fixed; content that does not fit
    is clipped at render time.
    """

    def __init__(
        self,
        header: str = "",
        footer: str = "",
        header_align: HorizontalAlign = HorizontalAlign.CENTER,
        data_align: HorizontalAlign = HorizontalAlign.LEFT,
        footer_align: HorizontalAlign = HorizontalAlign.CENTER,
        visible: bool = True,
        width: int | None = None,
    ) -> None:
        if width is not None and width < 0:
            raise ConfigurationError("width", width, "width must be non-negative")

        self._header = header.upper()
        self._footer = footer
        self._header_align = header_align
        self._data_align = data_align
        self._footer_align = footer_align
        self._visible = visible
        self._explicit_width = width is not None
        self._cells: list[str] = []
        if width is not None:
            self.width = width
        else:
            self.width = max(display_width(self._header), display_width(footer))

    @staticmethod
    def builder() -> ColumnBuilder:
        """Start a fluent column configuration."""
        return ColumnBuilder()

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def header(self) -> str:
        return self._header

    @property
    def footer(self) -> str:
        return self._footer

    @property
    def header_align(self) -> HorizontalAlign:
        return self._header_align

    @property
    def data_align(self) -> HorizontalAlign:
        return self._data_align

    @property
    def footer_align(self) -> HorizontalAlign:
        return self._footer_align

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def has_explicit_width(self) -> bool:
        return self._explicit_width

    # -------------------------------------------------------------------------
    # Cells
    # -------------------------------------------------------------------------

    @property
    def cells(self) -> tuple[str, ...]:
        return tuple(self._cells)

    @property
    def cell_count(self) -> int:
        return len(self._cells)

    def cell(self, index: int) -> str:
        return self._cells[index]

    def add_cell(self, value: CellValue) -> Column:
        """
        Append a cell, growing the column if it has no explicit width.

        Args:
            value: Cell content; non-strings are converted with ``str()``
                and ``None`` is stored as ``"null"``

        Returns:
            This column, for chaining
        """
        if value is None:
            text = NULL_CELL
        elif isinstance(value, str):
            text = value
        else:
            text = str(value)

        self._grow(text)
        self._cells.append(text)
        return self

    def _grow(self, text: str) -> None:
        if not self._explicit_width:
            self.width = max(self.width, display_width(text))

    # -------------------------------------------------------------------------
    # Copies
    # -------------------------------------------------------------------------

    def copy(self) -> Column:
        """Return an independent copy with the same configuration, width and cells."""
        clone = Column.__new__(Column)
        clone.__dict__.update(self.__dict__)
        clone._cells = list(self._cells)
        return clone

    def limited(self, limit: int) -> Column:
        """
        Return a column holding at most ``limit`` cells plus an ellipsis row.

        The column itself is returned unchanged when it already fits.

        Raises:
            ConfigurationError: If ``limit`` is negative
        """
        if limit < 0:
            raise ConfigurationError("limit", limit, "limit must be non-negative")
        if len(self._cells) <= limit:
            return self

        clone = self.copy()
        clone._cells = self._cells[:limit]
        for text in clone._cells:
            clone._grow(text)
        clone.add_cell(ELLIPSIS)
        return clone

    def __repr__(self) -> str:
        return (
            f"Column(header={self._header!r}, width={self.width}, "
            f"cells={len(self._cells)}, visible={self._visible})"
        )


class ColumnBuilder:
    """Fluent builder for :class:`Column`.

    All configuration methods return ``self`` for chaining. Header and footer
    text count towards the auto width; calling ``width()`` switches the column
    to a fixed width regardless of call order.
    """

    def __init__(self) -> None:
        self._header = ""
        self._footer = ""
        self._header_align = HorizontalAlign.CENTER
        self._data_align = HorizontalAlign.LEFT
        self._footer_align = HorizontalAlign.CENTER
        self._visible = True
        self._width: int | None = None

    def header(self, text: str) -> ColumnBuilder:
        """Set the header text (rendered upper-cased)."""
        if text is None:
            raise ConfigurationError("header", text, "header cannot be None")
        self._header = text
        return self

    def footer(self, text: str) -> ColumnBuilder:
        """Set the footer text. A footer row is drawn if any visible column has one."""
        if text is None:
            raise ConfigurationError("footer", text, "footer cannot be None")
        self._footer = text
        return self

    def header_align(self, align: HorizontalAlign | str) -> ColumnBuilder:
        """Set the header alignment (default: center)."""
        self._header_align = coerce_align(align)
        return self

    def data_align(self, align: HorizontalAlign | str) -> ColumnBuilder:
        """Set the data cell alignment (default: left)."""
        self._data_align = coerce_align(align)
        return self

    def footer_align(self, align: HorizontalAlign | str) -> ColumnBuilder:
        """Set the footer alignment (default: center)."""
        self._footer_align = coerce_align(align)
        return self

    def visible(self, visible: bool = True) -> ColumnBuilder:
        """Show or hide the column (default: shown)."""
        self._visible = visible
        return self

    def width(self, width: int) -> ColumnBuilder:
        """Fix the column width in display columns (must be non-negative)."""
        if width < 0:
            raise ConfigurationError("width", width, "width must be non-negative")
        self._width = width
        return self

    def build(self) -> Column:
        return Column(
            header=self._header,
            footer=self._footer,
            header_align=self._header_align,
            data_align=self._data_align,
            footer_align=self._footer_align,
            visible=self._visible,
            width=self._width,
        )
