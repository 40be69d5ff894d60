from gometrics.reporting.formatters import format_json, format_text

__all__ = ["format_json", "format_text"]
