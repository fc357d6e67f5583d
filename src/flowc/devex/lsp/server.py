#!/usr/bin/env python3
"""Flow Language Server.

Provides document symbols, hover previews of the generated C++, and
keyword completion for .flow files by reusing the compiler's classifier
and code generator.
"""

import logging
import sys

from lsprotocol import types as lsp
from pygls.lsp.server import LanguageServer

from flowc import __version__
from flowc.devex.lsp.completion import get_completions
from flowc.devex.lsp.hover import get_hover_info
from flowc.devex.lsp.symbols import get_document_symbols

logger = logging.getLogger("flowc-lsp")

server = LanguageServer("flowc-lsp", __version__)


def _source(uri: str) -> str:
    return server.workspace.get_text_document(uri).source


@server.feature(lsp.TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbol(params: lsp.DocumentSymbolParams):
    return get_document_symbols(_source(params.text_document.uri))


@server.feature(lsp.TEXT_DOCUMENT_HOVER)
def hover(params: lsp.HoverParams):
    return get_hover_info(_source(params.text_document.uri), params.position)


@server.feature(lsp.TEXT_DOCUMENT_COMPLETION, lsp.CompletionOptions(trigger_characters=[" "]))
def completion(params: lsp.CompletionParams):
    return get_completions(_source(params.text_document.uri), params.position)


def main():
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)
    logger.info("starting flowc-lsp %s", __version__)
    server.start_io()


if __name__ == "__main__":
    main()
