from .formatter import format_coordinate, format_result, format_table

__all__ = ["format_coordinate", "format_result", "format_table"]
