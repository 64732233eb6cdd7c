"""runfile: run a single Rust or Python source file without a project."""

__version__ = "0.1.0"
