"""Run the accessibility bridge MCP server."""

from .main import run

if __name__ == "__main__":
    run()
