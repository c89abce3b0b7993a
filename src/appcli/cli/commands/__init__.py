"""Command implementations for the appcli CLI.

Each module exports one class implementing the Command protocol
(name, help, add_arguments, run). The registry lists them explicitly.
"""
