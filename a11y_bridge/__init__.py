"""
Accessibility Report Bridge.

Turns raw findings from an external accessibility audit engine into a
UDOIT-style issue report:

1. Normalize - scaffold the HTML fragment into a full document
2. Resolve - locate each finding's XPath pointer (last match wins)
3. Filter - honor ignore-class markers and the operator skip list
4. Synthesize - keep rule-specific reason, message and arguments
5. Aggregate - ordered issues plus per-rule counts

Usage:
    # Start the MCP server
    python -m a11y_bridge
"""

__version__ = "1.0.0"
