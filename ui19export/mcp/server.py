"""UI-19 Export MCP Server - FastMCP implementation for export tools."""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ui19export.sdk import (
    ExportError,
    SUPPORTED_SYSTEMS,
    export_report,
    get_format_spec,
    get_output_dir,
    load_report,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("ui19-export")


# --- Tools ---

@mcp.tool()
async def list_export_systems() -> dict[str, Any]:
    """List the target systems a UI-19 report can be exported for, with their layouts."""
    systems = []
    for system in SUPPORTED_SYSTEMS:
        spec = get_format_spec(system)
        systems.append({
            "system": system,
            "label": spec.label,
            "layout": spec.layout,
            "delimiter": spec.delimiter,
            "columns": list(spec.column_names),
            "record_width": spec.record_width,
        })
    return {"systems": systems, "count": len(systems)}


@mcp.tool()
async def export_ui19_report(
    report_path: str = Field(description="Path to a UI-19 report file (.json, .yaml or .yml)"),
    system: str = Field(description=f"Target system: one of {', '.join(SUPPORTED_SYSTEMS)}"),
    write: bool = Field(default=False, description="Also write the file to the configured output directory"),
) -> dict[str, Any]:
    """Export a UI-19 report for a payroll or tax system. Returns the generated filename and payload text."""
    try:
        report = load_report(report_path)
        result = export_report(report, system)

        response = {
            "system": result.system,
            "filename": result.filename,
            "record_count": result.record_count,
            "size_bytes": len(result.content),
            "content": result.text,
        }

        if write:
            path = get_output_dir() / result.filename
            path.write_bytes(result.content)
            response["path"] = str(path)

        return response

    except ExportError as e:
        logger.error(f"Error exporting {report_path} for {system}: {e}")
        return {"error": str(e)}


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
