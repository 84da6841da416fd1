"""Operator list widget: OperatorTable."""

from textual.widgets import DataTable

from model import Operator, OperatorId

COLUMNS = ("ID", "Name", "Priority", "Weight", "Max TPS", "Status")


class OperatorTable(DataTable):
    """Read-only table of operators in server order.

    Rows are rebuilt from the store's tuple on every change. The table only
    remembers which operator id each row shows; callers resolve the id
    against the store so they always act on the canonical entry.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(cursor_type="row", zebra_stripes=True, **kwargs)
        self._row_ids: list[OperatorId | None] = []

    def on_mount(self) -> None:
        self.add_columns(*COLUMNS)

    def show_operators(self, operators: tuple[Operator, ...]) -> None:
        """Replace all rows, keeping the cursor position where possible."""
        cursor = self.cursor_row
        self.clear()
        self._row_ids = [operator.id for operator in operators]
        for operator in operators:
            self.add_row(
                "" if operator.id is None else str(operator.id),
                operator.name,
                str(operator.priority),
                str(operator.weight),
                str(operator.max_tps),
                operator.status,
            )
        if operators:
            self.move_cursor(row=min(cursor, len(operators) - 1))

    def selected_id(self) -> OperatorId | None:
        """Id of the operator under the cursor, or None for an empty table."""
        if self.row_count == 0:
            return None
        index = self.cursor_row
        if 0 <= index < len(self._row_ids):
            return self._row_ids[index]
        return None
