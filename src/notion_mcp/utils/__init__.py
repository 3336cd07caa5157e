from .ids import extract_notion_id, format_with_dashes

__all__ = [
    "extract_notion_id",
    "format_with_dashes",
]
