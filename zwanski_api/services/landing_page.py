"""
Zwanski API: Landing Page
==========================

What:  The HTML document served at `/`: endpoint cards, an interactive
       "try it" playground and two curl examples.
How:   Rendered from ENDPOINTS, the single catalog of public endpoints, so the
       page and the router cannot drift apart silently (tests compare them).
When:  Rendered on first request and reused for the life of the process.

The playground is a few lines of browser JavaScript: pick an endpoint, type one
optional value, and the raw JSON response is pretty-printed below the form.
"""

import html
import json
from functools import lru_cache
from typing import NamedTuple, Optional, Tuple

from zwanski_api.config import settings


class EndpointDoc(NamedTuple):
    """One public endpoint as shown on the landing page."""
    slug: str                  # path segment after /api/
    icon: str
    title: str
    description: str
    param: Optional[str] = None  # query parameter the playground fills in
    example: Optional[str] = None  # example value for `param`

    @property
    def path(self) -> str:
        return f"/api/{self.slug}"

    @property
    def example_path(self) -> str:
        if self.param and self.example:
            return f"{self.path}?{self.param}={self.example}"
        return self.path


ENDPOINTS: Tuple[EndpointDoc, ...] = (
    EndpointDoc("ip", "🌐", "IP Address", "Get your public IP address"),
    EndpointDoc("geo", "🗺️", "Geolocation", "Your location (country, city)"),
    EndpointDoc("timezone", "⏰", "Timezone", "Current time and timezone"),
    EndpointDoc("passgen", "🔐", "Password Generator", "Strong password generation", "length", "16"),
    EndpointDoc("hash", "🔒", "SHA-256 Hash", "Hash any text safely", "text", "hello"),
    EndpointDoc("lorem", "📝", "Lorem Ipsum", "Generate placeholder text", "size", "medium"),
    EndpointDoc("quote", "💬", "Quote", "Get motivational quotes"),
    EndpointDoc("score", "📊", "Zwanski Score", "Website quality analysis", "url", "example.com"),
    EndpointDoc("fingerprint", "👁️", "Browser Fingerprint", "Privacy & security info"),
    EndpointDoc("device", "📱", "Device Checker", "Device specs and support", "model", "iPhone14"),
    EndpointDoc("ping", "⚡", "Ping Monitor", "Check uptime and response time", "url", "example.com"),
    EndpointDoc("crypto", "💰", "Crypto Price", "Get cryptocurrency prices", "symbol", "BTC"),
)

_STYLE = """
  * { margin: 0; padding: 0; box-sizing: border-box; }
  body { font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
         background: #ffffff; color: #0F172A; line-height: 1.6; }
  header { background: linear-gradient(135deg, #1E293B 0%, #3B82F6 100%); color: white;
           padding: 3rem 2rem; text-align: center; }
  header h1 { font-size: 2.5rem; margin-bottom: 0.5rem; }
  header p { font-size: 1.2rem; opacity: 0.9; }
  .container { max-width: 1100px; margin: 0 auto; padding: 2rem; }
  .section { margin: 3rem 0; border: 1px solid #e2e8f0; border-radius: 8px;
             padding: 2rem; background: #f8fafc; }
  .section h2 { color: #1E293B; margin-bottom: 1rem; font-size: 1.8rem; }
  .api-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(280px, 1fr));
              gap: 1.5rem; margin-top: 1.5rem; }
  .api-card { background: white; border: 1px solid #cbd5e1; border-radius: 6px;
              padding: 1.5rem; }
  .api-card h3 { color: #3B82F6; margin-bottom: 0.5rem; font-size: 1.1rem; }
  .api-card p { color: #64748b; font-size: 0.95rem; }
  .endpoint { background: #1E293B; color: #38BDF8; padding: 0.5rem 0.75rem;
              border-radius: 4px; font-family: monospace; font-size: 0.85rem;
              margin-top: 0.5rem; word-break: break-all; }
  .playground { background: white; border: 1px solid #cbd5e1; border-radius: 6px;
                padding: 1.5rem; margin-top: 1.5rem; }
  .playground input, .playground select { padding: 0.75rem; border: 1px solid #cbd5e1;
                border-radius: 4px; font-size: 1rem; margin-right: 0.5rem; }
  .playground button { background: #3B82F6; color: white; border: none;
                padding: 0.75rem 1.5rem; border-radius: 4px; cursor: pointer; font-size: 1rem; }
  .result { background: #0F172A; color: #38BDF8; border-radius: 4px; padding: 1rem;
            margin-top: 1rem; font-family: monospace; font-size: 0.9rem; max-height: 300px;
            overflow-y: auto; white-space: pre-wrap; word-break: break-word; }
  footer { text-align: center; padding: 2rem; border-top: 1px solid #e2e8f0;
           color: #64748b; margin-top: 3rem; }
"""

_SCRIPT = """
  const PARAMS = %(params)s;
  async function runAPI() {
    const endpoint = document.getElementById('endpoint').value;
    const param = document.getElementById('param').value;
    const resultDiv = document.getElementById('result');
    let url = '/api/' + endpoint;
    if (param && PARAMS[endpoint]) {
      url += '?' + PARAMS[endpoint] + '=' + encodeURIComponent(param);
    }
    resultDiv.textContent = 'Loading...';
    try {
      const response = await fetch(url);
      const data = await response.json();
      resultDiv.textContent = JSON.stringify(data, null, 2);
    } catch (err) {
      resultDiv.textContent = 'Error: ' + err.message;
    }
  }
"""


def _card(doc: EndpointDoc) -> str:
    return (
        '<div class="api-card">'
        f"<h3>{doc.icon} {html.escape(doc.title)}</h3>"
        f"<p>{html.escape(doc.description)}</p>"
        f'<div class="endpoint">GET {html.escape(doc.example_path)}</div>'
        "</div>"
    )


def _option(doc: EndpointDoc) -> str:
    return f'<option value="{doc.slug}">{html.escape(doc.path)}</option>'


def _script() -> str:
    params = {doc.slug: doc.param for doc in ENDPOINTS if doc.param}
    # "</" cannot appear inside a <script> block
    return _SCRIPT % {"params": json.dumps(params).replace("</", "<\\/")}


def render_index_page(base_url: Optional[str] = None) -> str:
    """Render the full landing page for `base_url` (default: settings.public_base_url)."""
    base = html.escape((base_url or settings.public_base_url).rstrip("/"))
    cards = "\n".join(_card(doc) for doc in ENDPOINTS)
    options = "\n".join(_option(doc) for doc in ENDPOINTS)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Zwanski Tech API Platform</title>
  <style>{_STYLE}</style>
</head>
<body>
  <header>
    <h1>Zwanski Tech API Platform</h1>
    <p>Fast, stateless tools for security, performance and privacy</p>
  </header>
  <div class="container">
    <section class="section">
      <h2>📡 API Endpoints</h2>
      <div class="api-grid">
{cards}
      </div>
    </section>
    <section class="section">
      <h2>🧪 Try It Now</h2>
      <div class="playground">
        <label for="endpoint">Endpoint:</label>
        <select id="endpoint">
{options}
        </select>
        <input type="text" id="param" placeholder="param value (optional)" />
        <button onclick="runAPI()">Run</button>
        <div class="result" id="result"></div>
      </div>
    </section>
    <section class="section">
      <h2>📚 Documentation</h2>
      <h3>Example: Get your IP</h3>
      <div class="endpoint">curl {base}/api/ip</div>
      <h3>Example: Generate Password</h3>
      <div class="endpoint">curl {base}/api/passgen?length=20</div>
    </section>
    <footer><p>Zwanski Tech. Stateless, privacy-first APIs.</p></footer>
  </div>
  <script>{_script()}</script>
</body>
</html>
"""


@lru_cache(maxsize=1)
def index_page() -> str:
    """The landing page for the configured base URL, rendered once per process."""
    return render_index_page()
