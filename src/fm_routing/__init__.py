"""fm-routing: routing catalogue and display layout for six-operator FM algorithms."""

__version__ = "0.1.0"
