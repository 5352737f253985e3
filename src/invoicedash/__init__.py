"""Data access layer and CLI for an invoicing dashboard."""

__all__ = ["main"]


# The CLI pulls in every command module, so load it only on demand
def __getattr__(name):
    if name == "main":
        from invoicedash.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
