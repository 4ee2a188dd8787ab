"""ChatBot CLI - a line-oriented personal task tracker."""

__version__ = "0.3.0"
