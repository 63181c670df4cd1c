"""MCP Server for targeted file patching.

This module provides a FastMCP-based MCP server exposing file tools: reading
and creating files, and patching the first occurrence of a text pattern with
prepend, append, replace or swap operations.
"""

import argparse
import sys

from mcp.server import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.responses import PlainTextResponse
from starlette.responses import Response

from .config import get_settings
from .logger_config import configure_logging
from .metrics_config import METRICS_ENABLED
from .metrics_config import ensure_metrics_initialized
from .metrics_config import get_metrics_export
from .metrics_config import get_metrics_summary
from .storage import get_storage
from .tools import register_file_tools
from .tools import register_patch_tools

mcp_server = FastMCP(name="FileSystemTools")

# Register tools from modular architecture
register_file_tools(mcp_server)
register_patch_tools(mcp_server)


@mcp_server.custom_route("/health", methods=["GET"])
async def health(request: Request) -> Response:
    storage = get_storage()
    return JSONResponse(
        {
            "status": "ok",
            "server": mcp_server.name,
            "storage": {"backend": storage.backend_type, "root": storage.root_path},
            "metrics": get_metrics_summary(),
        }
    )


@mcp_server.custom_route("/metrics", methods=["GET"])
async def metrics_endpoint(request: Request) -> Response:
    body, content_type = get_metrics_export()
    return PlainTextResponse(body, media_type=content_type)


__all__ = ["mcp_server", "main"]


# --- Main Server Execution ---
def main():
    """Run the main entry point for the server with argument parsing."""
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Text Patch MCP Server")
    parser.add_argument(
        "transport",
        choices=["sse", "stdio"],
        default="stdio",
        nargs="?",
        help="Transport: 'sse' for HTTP SSE or 'stdio' for standard I/O (default: stdio)",
    )
    parser.add_argument(
        "--host",
        default=settings.sse_host,
        help=f"Host to bind to for SSE transport (default: {settings.sse_host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.sse_port,
        help=f"Port to bind to for SSE transport (default: {settings.sse_port})",
    )

    args = parser.parse_args()

    configure_logging(settings.log_level, settings.structured_logging)
    ensure_metrics_initialized(enabled=settings.enable_metrics and not settings.is_test_environment)

    print(f"Text patch tool server starting. Tools exposed by '{mcp_server.name}'.", file=sys.stderr)
    print(f"Storage root: {get_storage().root_path}", file=sys.stderr)
    print(f"Metrics: {'enabled' if METRICS_ENABLED and settings.enable_metrics else 'disabled'}", file=sys.stderr)

    if args.transport == "stdio":
        print("MCP server running with stdio transport. Waiting for client connection...", file=sys.stderr)
        mcp_server.run(transport="stdio")
    else:
        print(f"MCP server running with HTTP SSE transport on {args.host}:{args.port}", file=sys.stderr)
        print(f"SSE endpoint: http://{args.host}:{args.port}/sse", file=sys.stderr)
        print(f"Health endpoint: http://{args.host}:{args.port}/health", file=sys.stderr)
        print(f"Metrics endpoint: http://{args.host}:{args.port}/metrics", file=sys.stderr)
        # Update server settings before running
        mcp_server.settings.host = args.host
        mcp_server.settings.port = args.port
        mcp_server.run(transport="sse")


if __name__ == "__main__":
    main()
