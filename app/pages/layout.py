"""Shared page layout: head, navigation bar and footer around page content."""

from html import escape

_STYLE = """
        * { box-sizing: border-box; }
        body {
            font-family: system-ui, -apple-system, 'Segoe UI', sans-serif;
            margin: 0;
            color: #212529;
            background: #fff;
        }
        nav {
            display: flex;
            gap: 1.25rem;
            align-items: center;
            padding: 0.75rem 1.5rem;
            border-bottom: 1px solid #dee2e6;
            box-shadow: 0 0.25rem 0.75rem rgba(0, 0, 0, 0.05);
        }
        nav .brand { font-weight: 600; color: #212529; text-decoration: none; }
        nav a { color: #495057; text-decoration: none; }
        nav a:hover { color: #0d6efd; }
        main { max-width: 960px; margin: 0 auto; padding: 1.5rem; }
        table { width: 100%; border-collapse: collapse; margin-top: 1rem; }
        th, td { text-align: left; padding: 0.5rem 0.75rem; border-bottom: 1px solid #dee2e6; }
        thead th { border-bottom: 2px solid #dee2e6; }
        .text-danger { color: #dc3545; }
        pre { background: #f8f9fa; padding: 1rem; overflow-x: auto; font-size: 0.8125rem; }
        footer {
            border-top: 1px solid #dee2e6;
            color: #6c757d;
            padding: 1rem 1.5rem;
            font-size: 0.875rem;
        }
"""


def render_layout(title: str, body: str, app_name: str) -> str:
    """Wrap page body HTML in the site layout. title and app_name are escaped; body is not."""
    safe_name = escape(app_name)
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)} - {safe_name}</title>
    <style>{_STYLE}    </style>
</head>
<body>
    <nav>
        <a class="brand" href="/">{safe_name}</a>
        <a href="/home/index">Home</a>
        <a href="/home/privacy">Privacy</a>
    </nav>
    <main role="main">
{body}
    </main>
    <footer>
        &copy; {safe_name} - <a href="/home/privacy">Privacy</a>
    </footer>
</body>
</html>
""".strip()
