import re
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs, urlparse
import pytest
from pages.demo_site import DemoSite

HEADER = """
<div id="site-header"><h2>Demo Site</h2><a id="home-link" href="/">Home</a></div>
<form action="/search"><input id="search-query" name="q">
<input type="hidden" name="lang" value="en"><button id="search-submit">Search</button></form>
"""

ACCOUNTS = {"12345": ("Ada", "Lovelace"), "7": ("Alan", "Turing")}


def render(title, body):
    return f"<html><head><title>{title}</title></head><body>{HEADER}{body}</body></html>"


class DemoHandler(BaseHTTPRequestHandler):

    def do_GET(self):
        url = urlparse(self.path)
        query = parse_qs(url.query)
        path = url.path

        if path == "/":
            self._send(render("Home", "<h1>Welcome to the demo site</h1>"))
        elif match := re.fullmatch(r"/accounts/(\w+)/edit", path):
            code = match.group(1)
            first, last = ACCOUNTS.get(code, ("", ""))
            self._send(render("Edit account", (
                f'<form action="/accounts/{code}/save"><input id="fname" name="fname" value="{first}">'
                f'<input id="lname" name="lname" value="{last}"><button id="save">Save</button></form>')))
        elif match := re.fullmatch(r"/accounts/(\w+)/save", path):
            code = match.group(1)
            ACCOUNTS[code] = (query.get("fname", [""])[0], query.get("lname", [""])[0])
            self._redirect(f"/accounts/{code}")
        elif match := re.fullmatch(r"/accounts/(\w+)", path):
            first, last = ACCOUNTS.get(match.group(1), ("", ""))
            self._send(render("Account", (
                f'<span id="first-name">{first}</span><span id="last-name">{last}</span>')))
        elif path == "/search":
            q = query.get("q", [""])[0]
            self._send(render("Search", f'<ul id="results"><li>{q} result 1</li><li>{q} result 2</li></ul>'))
        elif path == "/checkout":
            self._send(render("Checkout", (
                '<a id="place-order" href="/checkout/complete">Place order</a>')))
        elif path == "/checkout/complete":
            self._send(render("Complete", '<p id="message">Thank you for your order</p>'))
        elif path == "/orders/latest":
            self._redirect("/orders/1001")
        elif match := re.fullmatch(r"/orders/(\d+)", path):
            self._send(render("Order", f'<p id="order-number">{match.group(1)}</p>'))
        else:
            self.send_error(404)

    def _send(self, html):
        body = html.encode("utf-8")
        self.send_response(200)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _redirect(self, location):
        self.send_response(302)
        self.send_header("Location", location)
        self.end_headers()

    def log_message(self, format, *args):
        pass


@pytest.fixture(scope="session")
def demo_server():
    """Serve the demo site on a free local port for the whole session."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), DemoHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


@pytest.fixture
def site(page, config, demo_server):
    return DemoSite.from_config(page, dict(config, base_url=demo_server))
