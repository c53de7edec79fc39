"""HTML for the landing page."""
import html
import platform
from datetime import datetime, timezone

EXAMPLE_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR%20w%20KQkq%20-%200%201"

_STYLE = """
      body {
        font-family: system-ui, -apple-system, 'Segoe UI', Roboto, sans-serif;
        max-width: 800px;
        margin: 40px auto;
        padding: 20px;
        line-height: 1.6;
        color: #333;
      }
      .status { background: #e8f5e9; padding: 15px; border-radius: 8px; margin: 20px 0; }
      .endpoint {
        background: #f5f5f5;
        padding: 15px;
        border-radius: 8px;
        margin: 20px 0;
        font-family: 'Courier New', monospace;
      }
      code { background: #f5f5f5; padding: 2px 6px; border-radius: 3px; }
"""


def base_url(host: str | None) -> str:
    """Public base URL for a Host header; plain http only on localhost."""
    host = host or "localhost:4021"
    protocol = "http" if "localhost" in host else "https"
    return f"{protocol}://{host}"


def landing_page(host: str | None, uptime_seconds: float, price: str, now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    root = html.escape(base_url(host), quote=True)
    price = html.escape(price)
    return f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Chess Best Move x402 API</title>
    <link rel="icon" href="/favicon.ico" type="image/x-icon">
    <meta property="og:title" content="Chess Best Move x402 API" />
    <meta property="og:description" content="Stockfish analysis for any chess position, paid per call with x402" />
    <meta property="og:image" content="{root}/og-image.png" />
    <meta property="og:url" content="{root}" />
    <meta name="twitter:card" content="summary_large_image" />
    <style>{_STYLE}</style>
  </head>
  <body>
    <h1>Chess Best Move x402 API</h1>
    <div class="status">
      <p><strong>Status:</strong> healthy</p>
      <p><strong>Timestamp:</strong> {now.isoformat()}</p>
      <p><strong>Uptime:</strong> {int(uptime_seconds)}s</p>
      <p><strong>Version:</strong> Python {platform.python_version()}</p>
    </div>

    <h2>About</h2>
    <p>Stockfish analysis for a chess position given in FEN notation.
    Each request costs {price}, paid with the x402 payment protocol.</p>

    <h2>API Endpoint</h2>
    <div class="endpoint">GET /best-move?fen=&lt;FEN_STRING&gt;&amp;depth=&lt;DEPTH&gt;</div>

    <h3>Parameters</h3>
    <ul>
      <li><code>fen</code> (required): FEN string of the position</li>
      <li><code>depth</code> (optional): analysis depth (1-30, default: 10)</li>
    </ul>

    <h3>Example</h3>
    <div class="endpoint">{root}/best-move?fen={EXAMPLE_FEN}&amp;depth=15</div>

    <h2>Resources</h2>
    <p>Building an x402 app? See the <a href="https://echo.merit.systems/docs" target="_blank">Docs</a>.</p>
  </body>
</html>
"""
