"""Code completion provider for Flow.

Flow has no declarations worth completing beyond keywords, so this offers
the statement keywords and the built-in values.
"""

from lsprotocol import types as lsp


# ---------------------------------------------------------------------------
# Keyword completions
# ---------------------------------------------------------------------------

_FLOW_KEYWORDS = [
    ("say", "Print a value followed by a newline"),
    ("let", "Bind a name: let x = value"),
    ("if", "Conditional block: if cond then ... end"),
    ("then", "Ends the condition of an if"),
    ("else", "Alternative branch of an if"),
    ("end", "Close the innermost block"),
    ("loop", "Repeat a block: loop n times ... end"),
    ("times", "Ends the count of a loop"),
    ("while", "Loop while a condition holds: while cond do ... end"),
    ("do", "Ends the condition of a while"),
    ("define", "Define a function: define name(a, b) ... end"),
    ("return", "Return a value from a function"),
    ("grow", "Multiply a variable in place by the golden ratio"),
    ("break", "Leave the innermost loop"),
    ("continue", "Skip to the next loop iteration"),
    ("and", "Logical and"),
    ("or", "Logical or"),
    ("not", "Logical negation"),
]

_FLOW_VALUES = [
    ("phi", "The golden ratio, 1.6180339887498948"),
    ("true", "Boolean literal true"),
    ("false", "Boolean literal false"),
]


def get_completions(source: str, position: lsp.Position) -> lsp.CompletionList:
    source_lines = source.split("\n")
    line = source_lines[position.line] if position.line < len(source_lines) else ""
    before = line[:position.character]

    # Word being typed at the cursor
    prefix = ""
    for ch in reversed(before):
        if not (ch.isalnum() or ch == "_"):
            break
        prefix = ch + prefix

    items = [
        lsp.CompletionItem(label=word, kind=lsp.CompletionItemKind.Keyword, detail=doc)
        for word, doc in _FLOW_KEYWORDS
        if word.startswith(prefix)
    ]
    items += [
        lsp.CompletionItem(label=word, kind=lsp.CompletionItemKind.Constant, detail=doc)
        for word, doc in _FLOW_VALUES
        if word.startswith(prefix)
    ]
    return lsp.CompletionList(is_incomplete=False, items=items)
