"""Table fragment construction from tabular string data"""

from typing import Any, Sequence

from richmd.core.nodes import BlockType, block_node, text_node


def create_table(rows: Sequence[Sequence[str]]) -> dict[str, Any]:
    """Build a table node from a 2D list of strings; the first row becomes header cells.

    The renderer has no Markdown form for tables, so the fragment is meant for
    other consumers of the tree (plain text, statistics, HTML renderers).
    """
    return block_node(BlockType.table, [
        block_node(BlockType.table_row, [
            block_node(
                BlockType.table_header_cell if i == 0 else BlockType.table_cell,
                [block_node(BlockType.paragraph, [text_node(cell)])],
            )
            for cell in row
        ])
        for i, row in enumerate(rows)
    ])
