from flowstyle.stylesheet.generator import generate_stylesheet, stylesheet

__all__ = ["generate_stylesheet", "stylesheet"]
