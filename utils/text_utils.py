import html

def escape_html(text: str) -> str:
    return html.escape(text)

def bold(text: str) -> str:
    return f"<b>{escape_html(text)}</b>"

def italic(text: str) -> str:
    return f"<i>{escape_html(text)}</i>"
