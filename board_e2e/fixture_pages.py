"""HTML fixtures served to the browser in place of the board application."""
from __future__ import annotations

from html import escape
from typing import Iterable, Mapping

# Board tag styling. Keys are tag labels; every tag also gets the base rule.
TAG_BASE_STYLE = (
    "display:inline-block; margin-right:6px; padding:2px 10px; border-radius:9999px; "
    "background-color:#f3f4f6; color:#374151; font-size:12px; font-weight:400"
)
TAG_STYLES: Mapping[str, str] = {
    "High Priority": "font-weight:600; background-color:#fef3c7",
    "Bug": "color:#ef4444; background-color:#fee2e2",
    "Design": "background-color:#e0e7ff",
    "Feature": "padding-left:12px; padding-right:12px; background-color:#dcfce7",
    "Marketing": "background-color:#fce7f3",
}


def tag_stylesheet() -> str:
    """CSS rules for `.tag` elements, shared with the mock board app."""
    rules = [f".tag {{ {TAG_BASE_STYLE}; }}"]
    for label, style in TAG_STYLES.items():
        rules.append(f'.tag[data-tag="{escape(label)}"] {{ {style}; }}')
    return "\n    ".join(rules)


def card_page(title: str, tags: Iterable[str]) -> str:
    """Minimal board card rendering: title plus one span per tag."""
    tag_html = "".join(
        f'<span class="tag" data-tag="{escape(tag)}">{escape(tag)}</span>' for tag in tags
    )
    return f"""<!doctype html><html><head>
  <style>
    body {{ font-family: Inter, system-ui, sans-serif; }}
    {tag_stylesheet()}
  </style>
  </head><body><article data-testid="card"><h2>{escape(title)}</h2>{tag_html}</article></body></html>"""


def login_page() -> str:
    return """<!doctype html><html><body>
  <form id="loginForm" onsubmit="event.preventDefault(); location.href='/dashboard'">
    <input type="email" />
    <input type="password" />
    <button type="submit">Login</button>
    <div class="success-message" style="display:none">Logged in</div>
  </form>
  </body></html>"""


def dashboard_page() -> str:
    return '<h1>Dashboard</h1><div class="welcome-message">Welcome</div>'


def signup_page() -> str:
    return """<!doctype html><html><body>
  <form id="signupForm" onsubmit="event.preventDefault(); document.querySelector('.success-message').style.display='block'; setTimeout(()=>location.href='/login', 10)">
    <input name="firstName" />
    <input name="lastName" />
    <input type="email" />
    <input name="password" />
    <input name="confirmPassword" />
    <button type="submit">Sign up</button>
    <div class="success-message" style="display:none">Account created</div>
  </form>
  </body></html>"""


def mobile_menu_page() -> str:
    # The menu covers the right side only so a click near the top-left lands outside it.
    return """<!doctype html><html><head>
  <style>
    html, body { margin:0; min-height:100vh; }
    .nav-menu { display:none; position:fixed; top:0; right:0; width:60%; height:100%; background:#eee; }
  </style>
  </head><body>
  <button aria-label="Menu" class="mobile-menu-toggle" onclick="document.querySelector('.nav-menu').style.display='block'">&#9776;</button>
  <div class="nav-menu">
    <button aria-label="Close menu" class="menu-close" onclick="document.querySelector('.nav-menu').style.display='none'">&times;</button>
    <a href="#">Home</a>
  </div>
  <script>
    document.addEventListener('click', function (event) {
      var menu = document.querySelector('.nav-menu');
      if (menu.contains(event.target) || event.target.closest('.mobile-menu-toggle')) { return; }
      menu.style.display = 'none';
    });
  </script>
  </body></html>"""


def design_system_page() -> str:
    return """<!doctype html><html><head>
  <style>
    body { font-family: Inter, system-ui, sans-serif; }
    h1 { font-size: 36px; }
    button.primary { background-color: #3B82F6; color: white; }
  </style>
  </head><body>
    <h1>Heading</h1>
    <button class="primary">Primary</button>
  </body></html>"""


def payment_page() -> str:
    return """<!doctype html><html><body>
  <form id="paymentForm" onsubmit="event.preventDefault(); fetch('/api/payments/process',{method:'POST'}).then(r=>r.json()).then(j=>{document.body.insertAdjacentHTML('beforeend', '<div class=&quot;payment-status&quot;>'+j.status+'</div>')})">
    <input name="cardNumber" />
    <input name="expiryDate" />
    <input name="cvv" />
    <input name="amount" />
    <button type="submit">Pay</button>
  </form>
  </body></html>"""


def docs_page() -> str:
    return """<!doctype html><html><body>
  <div>GET /api/users</div>
  <div>POST /api/users</div>
  </body></html>"""


def push_page() -> str:
    return """<!doctype html><html><body>
  <button id="enablePush" onclick="Notification.requestPermission().then(()=>{document.body.insertAdjacentHTML('beforeend','<div>Notifications enabled</div>')})">Enable</button>
  </body></html>"""


def offline_page() -> str:
    return """<!doctype html><html><body>
  <div id="status"></div>
  <script>
    function renderStatus() {
      document.getElementById('status').textContent = navigator.onLine ? 'online' : 'offline';
    }
    window.addEventListener('online', renderStatus);
    window.addEventListener('offline', renderStatus);
    renderStatus();
  </script>
  </body></html>"""


def icons_page() -> str:
    return """<!doctype html><html><head>
  <link rel="icon" sizes="16x16" href="/favicon-16x16.png">
  <link rel="icon" sizes="32x32" href="/favicon-32x32.png">
  <link rel="apple-touch-icon" sizes="180x180" href="/apple-touch-icon.png">
  </head><body></body></html>"""


def calendar_page() -> str:
    return """<!doctype html><html><body>
  <h1>Next Month Plan</h1>
  <table id="calendar"><tbody>
  <tr><td>Week 1</td><td>Post A</td></tr>
  <tr><td>Week 2</td><td>Post B</td></tr>
  <tr><td>Week 3</td><td>Post C</td></tr>
  <tr><td>Week 4</td><td>Post D</td></tr>
  </tbody></table>
  </body></html>"""


def email_page() -> str:
    return """<!doctype html><html><body>
  <h1>Q2 Campaign</h1>
  <a href="#" class="cta">CTA</a>
  </body></html>"""


def landing_page() -> str:
    return """<!doctype html><html><body>
  <div>Approved</div>
  <div>No lorem ipsum</div>
  </body></html>"""
