"""StyleCop CLI - Command-line front-end for StyleCop C# source analysis."""

__version__ = "0.1.0"
__all__ = ["__version__"]
