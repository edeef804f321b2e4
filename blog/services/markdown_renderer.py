import markdown

MARKDOWN_EXTENSIONS = [
    "tables",
    "footnotes",
    "attr_list",
    "fenced_code",
    "pymdownx.tilde",
]

MARKDOWN_EXTENSION_CONFIGS = {
    # ~~text~~ only; a single ~ stays literal
    "pymdownx.tilde": {"subscript": False},
}


def render_markdown(text: str) -> str:
    """Render a post body to HTML.

    Supports strikethrough, tables, footnotes and ``{#id}`` heading
    attributes. Anything else the renderer does not recognise is emitted as
    plain text. Output is not escaped further: post bodies are trusted.
    """
    return markdown.markdown(
        text,
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=MARKDOWN_EXTENSION_CONFIGS,
    )
