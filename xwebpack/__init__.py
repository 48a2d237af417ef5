"""xwebpack - scaffold a React + Redux + antd project from a template repository."""

__version__ = "0.1.0"
