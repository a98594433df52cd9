"""
Swiss Legal Citations MCP Server
================================

Local MCP server for validating, parsing, formatting and converting Swiss
legal citations. Runs over stdio; every tool is a pure function of its
arguments, so results are memoized in a small in-process cache.

Installation:
    pip install -e .

Usage with Claude Desktop:
    claude mcp add legal-citations -- legal-citations-mcp

    Or in claude_desktop_config.json:
    {
      "mcpServers": {
        "legal-citations": {
          "command": "python3",
          "args": ["/path/to/mcp_server.py"]
        }
      }
    }

Tools exposed:
    validate_citation  — Check a citation; errors with codes and positions,
                         canonical form, suggestions. Optional strict mode.
    parse_citation     — Structured components of a citation.
    format_citation    — Render in de/fr/it/en, style full/short/inline.
    convert_citation   — BGE <-> ATF <-> DTF, statute terminology across
                         languages (never across citation families).
    extract_citations  — Find all well-formed citations in running text.
"""
from __future__ import annotations

import copy
import json
import logging
import os
import sys
import time
from collections import OrderedDict

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool
from pydantic import ValidationError

from legal_citations import convert_citation, extract_citations, format_citation, parse_citation, validate_citation
from legal_citations.models import (
    ConvertCitationRequest,
    ExtractCitationsRequest,
    ExtractedCitationModel,
    ExtractionResult,
    FormatCitationRequest,
    ParseCitationRequest,
    ValidateCitationRequest,
)
from legal_citations.terminology import LANGUAGES

# ── Configuration ─────────────────────────────────────────────
LOG_LEVEL = os.environ.get("LEGAL_CITATIONS_LOG_LEVEL", "INFO").upper()
CACHE_SIZE = int(os.environ.get("LEGAL_CITATIONS_CACHE_SIZE", "1000"))
CACHE_TTL_SECONDS = float(os.environ.get("LEGAL_CITATIONS_CACHE_TTL", str(15 * 60)))

SERVER_NAME = "legal-citations"

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
    stream=sys.stderr,  # MCP uses stdout for protocol, logs go to stderr
)
logger = logging.getLogger("legal-citations-mcp")

CITATION_TYPES = ["bge", "statute", "doctrine"]
STYLES = ["full", "short", "inline"]


# ── Result cache ──────────────────────────────────────────────

class ResultCache:
    """LRU cache with a time-to-live, keyed by tool name + arguments.

    Pass-through memoization only: the citation operations are
    deterministic, so a hit is indistinguishable from a fresh call.
    """

    def __init__(self, max_size: int = CACHE_SIZE, ttl_seconds: float = CACHE_TTL_SECONDS):
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self._entries: OrderedDict[str, tuple[float, dict]] = OrderedDict()

    @staticmethod
    def make_key(operation: str, arguments: dict) -> str:
        params = {k: v for k, v in sorted(arguments.items()) if v is not None}
        return f"{operation}:{json.dumps(params, sort_keys=True, ensure_ascii=False)}"

    def get(self, key: str) -> dict | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        stored_at, value = entry
        if time.monotonic() - stored_at > self.ttl_seconds:
            del self._entries[key]
            return None
        self._entries.move_to_end(key)
        return copy.deepcopy(value)

    def set(self, key: str, value: dict) -> None:
        if self.max_size <= 0:
            return
        self._entries[key] = (time.monotonic(), copy.deepcopy(value))
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_size:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


result_cache = ResultCache()


# ── Tool implementations ──────────────────────────────────────

def _validate(arguments: dict) -> dict:
    req = ValidateCitationRequest(**arguments)
    result = validate_citation(req.citation, strict=req.strict, citation_type=req.citation_type)
    return result.model_dump(mode="json", exclude_none=True)


def _parse(arguments: dict) -> dict:
    req = ParseCitationRequest(**arguments)
    result = parse_citation(req.citation, req.citation_type)
    return result.model_dump(mode="json", exclude_none=True)


def _format(arguments: dict) -> dict:
    req = FormatCitationRequest(**arguments)
    result = format_citation(req.citation, req.target_language, req.style)
    return result.model_dump(mode="json", exclude_none=True)


def _convert(arguments: dict) -> dict:
    req = ConvertCitationRequest(**arguments)
    result = convert_citation(
        req.citation,
        to_format=req.to_format,
        from_format=req.from_format,
        target_language=req.target_language,
    )
    return result.model_dump(mode="json", exclude_none=True)


def _extract(arguments: dict) -> dict:
    req = ExtractCitationsRequest(**arguments)
    refs = extract_citations(req.text)[: req.limit]
    result = ExtractionResult(
        count=len(refs),
        citations=[ExtractedCitationModel(**r.to_dict()) for r in refs],
    )
    return result.model_dump(mode="json", exclude_none=True)


TOOL_HANDLERS = {
    "validate_citation": _validate,
    "parse_citation": _parse,
    "format_citation": _format,
    "convert_citation": _convert,
    "extract_citations": _extract,
}


def run_tool(name: str, arguments: dict | None, cache: ResultCache | None = None) -> dict:
    """Run a citation tool and return its JSON-ready result.

    Raises KeyError for unknown tools and pydantic.ValidationError for
    malformed arguments.
    """
    handler = TOOL_HANDLERS[name]
    arguments = arguments or {}
    cache = result_cache if cache is None else cache

    key = ResultCache.make_key(name, arguments)
    cached = cache.get(key)
    if cached is not None:
        logger.debug(f"cache hit: {key}")
        return cached

    result = handler(arguments)
    cache.set(key, result)
    return result


# ── MCP Server ────────────────────────────────────────────────

server = Server(SERVER_NAME)


@server.list_tools()
async def handle_list_tools() -> list[Tool]:
    return [
        Tool(
            name="validate_citation",
            description=(
                "Validate a Swiss legal citation. Supports BGE/ATF/DTF "
                "(Federal Supreme Court), statute citations (Art. 97 OR, "
                "art. 8 al. 1 CC, ...) and doctrine (GAUCH/SCHLUEP/SCHMID, OR AT, N 123). "
                "Returns errors with machine-readable codes, the canonical form "
                "and suggestions."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "citation": {
                        "type": "string",
                        "description": (
                            "Citation to validate. Examples:\n"
                            "- BGE 145 III 229\n"
                            "- ATF 140 II 315 consid. 4.2\n"
                            "- Art. 8 Abs. 1 lit. a ZGB"
                        ),
                    },
                    "strict": {
                        "type": "boolean",
                        "description": (
                            "Also flag implausible values: BGE volume outside 1-200, "
                            "non-positive numbers, unknown statute abbreviation"
                        ),
                        "default": False,
                    },
                    "citation_type": {
                        "type": "string",
                        "enum": CITATION_TYPES,
                        "description": "Expected citation type (auto-detected if omitted)",
                    },
                },
                "required": ["citation"],
            },
        ),
        Tool(
            name="parse_citation",
            description=(
                "Parse a Swiss legal citation into structured components. "
                "BGE: prefix, volume, section, page, consideration. "
                "Statute: article, paragraph, letter, number, statute abbreviation."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "citation": {"type": "string", "description": "Citation to parse"},
                    "citation_type": {
                        "type": "string",
                        "enum": CITATION_TYPES,
                        "description": "Expected citation type (auto-detected if omitted)",
                    },
                },
                "required": ["citation"],
            },
        ),
        Tool(
            name="format_citation",
            description=(
                "Format a Swiss legal citation in a target language and style.\n"
                "- de: BGE, Art., Abs., lit., Ziff., E.\n"
                "- fr: ATF, art., al., let., ch., consid.\n"
                "- it: DTF, art., cpv., lett., n., consid.\n"
                "- en: BGE, Art., para., let., no., consid.\n"
                "Styles: full (all components), short (no consideration; "
                "statute article + code only), inline (no prefix / article marker)."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "citation": {"type": "string", "description": "Citation to format"},
                    "target_language": {
                        "type": "string",
                        "enum": list(LANGUAGES),
                        "description": "Target language",
                    },
                    "style": {
                        "type": "string",
                        "enum": STYLES,
                        "description": "Output style (default: full)",
                        "default": "full",
                    },
                },
                "required": ["citation", "target_language"],
            },
        ),
        Tool(
            name="convert_citation",
            description=(
                "Convert a Swiss legal citation between languages within its family: "
                "BGE <-> ATF <-> DTF, and statute terminology/abbreviations "
                "(Art. 97 Abs. 1 OR -> art. 97 al. 1 CO). Case-law and statute "
                "citations cannot be converted into each other; doctrine output "
                "is not supported."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "citation": {"type": "string", "description": "Citation to convert"},
                    "from_format": {
                        "type": "string",
                        "enum": CITATION_TYPES,
                        "description": "Source format (auto-detected if omitted)",
                    },
                    "to_format": {
                        "type": "string",
                        "enum": CITATION_TYPES,
                        "description": "Target format",
                    },
                    "target_language": {
                        "type": "string",
                        "enum": list(LANGUAGES),
                        "description": "Target language (default: de)",
                        "default": "de",
                    },
                },
                "required": ["citation", "to_format"],
            },
        ),
        Tool(
            name="extract_citations",
            description=(
                "Find all well-formed BGE/ATF/DTF and statute citations in a text, "
                "with character offsets, canonical form and parsed components."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "text": {"type": "string", "description": "Text to scan"},
                    "limit": {
                        "type": "integer",
                        "description": "Max citations (default 100, max 1000)",
                        "default": 100,
                    },
                },
                "required": ["text"],
            },
        ),
    ]


@server.call_tool()
async def handle_call_tool(name: str, arguments: dict) -> list[TextContent]:
    if name not in TOOL_HANDLERS:
        return [TextContent(type="text", text=f"Unknown tool: {name}")]
    try:
        result = run_tool(name, arguments)
        return [TextContent(
            type="text",
            text=json.dumps(result, indent=2, ensure_ascii=False),
        )]
    except ValidationError as e:
        logger.warning(f"Invalid arguments for {name}: {e.error_count()} error(s)")
        return [TextContent(type="text", text=f"Error: invalid arguments for {name}\n{e}")]
    except Exception as e:
        logger.error(f"Tool error {name}: {e}", exc_info=True)
        return [TextContent(type="text", text=f"Error: {e}")]


# ── Main ──────────────────────────────────────────────────────

async def main():
    logger.info("Swiss Legal Citations MCP Server starting")
    logger.info(f"Result cache: {CACHE_SIZE} entries, TTL {CACHE_TTL_SECONDS:.0f}s")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def cli():
    import asyncio
    asyncio.run(main())


if __name__ == "__main__":
    cli()
