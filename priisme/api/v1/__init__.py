from . import auth, analyze_style, style_analyses

__all__ = ["auth", "analyze_style", "style_analyses"]
