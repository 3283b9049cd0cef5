"""Tools de envio expostas ao protocolo de ferramentas."""

from app.tools.registry import TOOLS, ToolSpec, UnknownToolError, invoke_tool, list_tools

__all__ = ["TOOLS", "ToolSpec", "UnknownToolError", "invoke_tool", "list_tools"]
