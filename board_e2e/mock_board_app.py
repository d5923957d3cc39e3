"""Mock board application for the web-app suite.

Serves the pages the suite drives (login, signup, dashboard, payment, API
docs and the home page with the mobile menu) plus the JSON API:

- POST /api/payments/create-intent, /api/payments/process
- GET  /api/payments/status
- GET/POST /api/users, GET /api/users/profile
- POST /api/auth/login
- GET  /api/docs, /api/docs/openapi.json

State lives in module-level dictionaries; call `reset_mock_state()` between
tests.
"""
from __future__ import annotations

import re
import secrets
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, redirect, render_template_string, request, session, url_for

from board_e2e.cards import load_cards, load_test_data
from board_e2e.fixture_pages import tag_stylesheet

# Mock data storage
USERS: Dict[str, Dict[str, Any]] = {}  # email -> user record (with password)
TOKENS: Dict[str, str] = {}  # bearer token -> email
PAYMENT_INTENTS: Dict[str, Dict[str, Any]] = {}  # intent id -> intent

MOCK_USER_EMAIL = "qa.user@example.com"
MOCK_USER_PASSWORD = "Password123!"
SEEDED_INTENT_ID = "pi_test_123"
DECLINED_CARDS = {"4000000000000002"}

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
REQUIRED_USER_FIELDS = ("firstName", "lastName", "email", "password")
SOCIAL_CALENDAR = ("Product launch teaser", "Customer story", "Feature spotlight", "Q2 recap")


def reset_mock_state() -> None:
    """Restore the seeded user and payment intent."""
    USERS.clear()
    TOKENS.clear()
    PAYMENT_INTENTS.clear()
    USERS[MOCK_USER_EMAIL] = {
        "id": "usr_seed",
        "firstName": "QA",
        "lastName": "User",
        "email": MOCK_USER_EMAIL,
        "password": MOCK_USER_PASSWORD,
    }
    PAYMENT_INTENTS[SEEDED_INTENT_ID] = {
        "id": SEEDED_INTENT_ID,
        "amount": 1000,
        "currency": "usd",
        "status": "requires_payment_method",
    }


reset_mock_state()


def _public_user(user: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in user.items() if key != "password"}


def _error(message: str, status: int) -> Tuple[Any, int]:
    return jsonify({"error": message}), status


def _object(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _bearer_user() -> Optional[Dict[str, Any]]:
    header = request.headers.get("Authorization", "")
    if not header.startswith("Bearer "):
        return None
    email = TOKENS.get(header[len("Bearer "):].strip())
    return USERS.get(email) if email else None


def _api_endpoints() -> List[Dict[str, Any]]:
    return load_test_data()["webapp"]["documentation"]["apiEndpoints"]


LAYOUT = """<!doctype html>
<html lang="en"><head>
<meta charset="utf-8"><meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{ title }} - Board</title>
<style>
  html, body { margin: 0; min-height: 100vh; }
  body { font-family: Inter, system-ui, sans-serif; color: #111827; }
  h1 { font-size: 36px; }
  h2 { font-size: 24px; }
  main { padding: 24px; }
  input { border: 1px solid #6b7280; padding: 6px 8px; display: block; margin-bottom: 8px; }
  .btn-primary, button[type="submit"] { background-color: #3b82f6; color: #ffffff; border: none; padding: 8px 16px; }
  .error-message { color: #ef4444; }
  .success-message, .welcome-message { color: #22c55e; }
  .desktop-nav a { margin-right: 12px; }
  .mobile-menu-toggle { display: none; }
  .nav-menu { display: none; position: fixed; top: 0; right: 0; width: 60%; height: 100%; background: #f3f4f6; padding: 16px; }
  .nav-menu.open { display: block; }
  .nav-menu a { display: block; padding: 8px 0; }
  @media (max-width: 768px) {
    .desktop-nav { display: none; }
    .mobile-menu-toggle { display: inline-block; }
  }
  .cards-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(240px, 1fr)); gap: 16px; }
  .card { border: 1px solid #e5e7eb; border-radius: 8px; padding: 12px; }
  .endpoint { border-bottom: 1px solid #e5e7eb; padding: 8px 0; }
  {{ tag_css | safe }}
</style>
</head><body>
<nav class="navbar" data-testid="navigation">
  <div class="desktop-nav">{% for item in menu_items %}<a href="#">{{ item }}</a>{% endfor %}</div>
  <button aria-label="Menu" class="mobile-menu-toggle" type="button">&#9776;</button>
  <div class="nav-menu">
    <button aria-label="Close menu" class="menu-close" type="button">&times;</button>
    {% for item in menu_items %}<a href="#" class="menu-item">{{ item }}</a>{% endfor %}
  </div>
</nav>
<main>{{ body | safe }}</main>
<script>
  (function () {
    var menu = document.querySelector('.nav-menu');
    document.querySelector('.mobile-menu-toggle').addEventListener('click', function (event) {
      event.stopPropagation();
      menu.classList.add('open');
    });
    document.querySelector('.menu-close').addEventListener('click', function () { menu.classList.remove('open'); });
    menu.querySelectorAll('.menu-item').forEach(function (link) {
      link.addEventListener('click', function (event) { event.preventDefault(); menu.classList.remove('open'); });
    });
    document.addEventListener('click', function (event) {
      if (!menu.contains(event.target)) { menu.classList.remove('open'); }
    });
  })();
</script>
</body></html>"""

HOME = """<h1>Task Board</h1>
<section class="landing-content" data-testid="landing-content">
  <div data-testid="landing-hero">
    <h2>Plan, track and ship</h2>
    <p>Everything your team is working on, in one place.</p>
    <a class="btn-primary" href="/signup">Get started</a>
  </div>
  <p class="approval-status" data-testid="approval-status">Approved</p>
</section>
<section class="social-calendar" data-testid="social-calendar">
  <h3>Content calendar</h3>
  <ul data-testid="calendar-grid">
  {% for week, item in calendar %}
    <li data-testid="calendar-entry"><strong>Week {{ week }}</strong> {{ item }}</li>
  {% endfor %}
  </ul>
</section>
<section class="email-campaign" data-testid="email-campaign">
  <h3 data-testid="email-subject">Q2 Campaign: Spring release</h3>
  <a class="cta" data-testid="email-cta" href="/signup">Try the new board</a>
</section>"""

LOGIN = """<h1 class="page-title">Sign in</h1>
{% if success %}<div class="success-message" data-testid="success-message">{{ success }}</div>{% endif %}
{% if error %}<div class="error-message" data-testid="error-message">{{ error }}</div>{% endif %}
<form method="post" action="/login" data-testid="login-form" novalidate>
  <input type="email" name="email" id="email" value="{{ email }}"{% if 'email' in invalid %} aria-invalid="true"{% endif %}>
  <input type="password" name="password" id="password"{% if 'password' in invalid %} aria-invalid="true"{% endif %}>
  <button type="submit" data-testid="login-button">Login</button>
</form>
<a href="/forgot-password" data-testid="forgot-password">Forgot password?</a>
<a href="/signup" data-testid="signup-link">Create an account</a>"""

SIGNUP = """<h1 class="page-title">Create account</h1>
{% if error %}<div class="error-message">{{ error }}</div>{% endif %}
<form method="post" action="/signup" novalidate>
  <input name="firstName" value="{{ form.firstName }}">
  <input name="lastName" value="{{ form.lastName }}">
  <input type="email" name="email" value="{{ form.email }}">
  <input name="password" type="password">
  <input name="confirmPassword" type="password">
  <button type="submit">Sign up</button>
</form>"""

DASHBOARD = """<h1>Dashboard</h1>
<div class="welcome-message" data-testid="dashboard">Welcome, {{ user.firstName }}</div>
<a href="/logout" class="logout" data-testid="logout">Log out</a>
<div class="cards-grid" data-testid="card-container">
{% for category, cards in sections %}
  <section class="category-section" data-testid="category-section" data-category="{{ category }}">
    <h2 class="category-title">{{ category }}</h2>
    {% for card in cards %}
    <div class="card" data-testid="card">
      <h3 class="card-title">{{ card.title }}</h3>
      <p class="card-description">{{ card.description }}</p>
      <div class="card-tags">{% for tag in card.tags %}<span class="tag" data-tag="{{ tag }}">{{ tag }}</span>{% endfor %}</div>
    </div>
    {% endfor %}
  </section>
{% endfor %}
</div>"""

PAYMENT = """<h1>Payment</h1>
{% if success %}<div class="success-message">{{ success }}</div>{% endif %}
{% if error %}<div class="error-message">{{ error }}</div>{% endif %}
<form method="post" action="/payment" novalidate>
  {% for field in ['cardNumber', 'expiryDate', 'cvv', 'amount'] %}
  <input name="{{ field }}" value="{{ form.get(field, '') }}"{% if field in invalid %} aria-invalid="true"{% endif %}>
  {% endfor %}
  <button type="submit">Pay</button>
</form>"""

API_DOCS = """<h1>API Documentation</h1>
{% for endpoint in endpoints %}
<div class="endpoint api-endpoint">
  <span class="method">{{ endpoint.method }}</span> <code class="path">{{ endpoint.path }}</code>
  <p class="description">{{ endpoint.description }}</p>
  {% if endpoint.requiresAuth %}<span class="auth-required">Authentication Required</span>{% endif %}
</div>
{% endfor %}
<section class="try-it-out">
  <h2>Try the API</h2>
  <button type="button">Try it out</button>
</section>"""


def create_app() -> Flask:
    """Create and configure the mock board Flask app."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.secret_key = secrets.token_hex(16)

    test_data = load_test_data()
    menu_items = test_data["webapp"]["navigation"]["mobileMenu"]["menuItems"]

    def render(title: str, template: str, **context: Any) -> str:
        body = render_template_string(template, **context)
        return render_template_string(LAYOUT, title=title, body=body, menu_items=menu_items, tag_css=tag_stylesheet())

    # ---- pages -------------------------------------------------------------------
    @app.route("/")
    def home():
        return render("Home", HOME, calendar=list(enumerate(SOCIAL_CALENDAR, start=1)))

    @app.route("/login", methods=["GET", "POST"])
    def login():
        context: Dict[str, Any] = {"email": "", "invalid": [], "error": None, "success": None}
        if request.args.get("signup"):
            context["success"] = "Account created. Please sign in."
        if request.method == "GET":
            return render("Sign in", LOGIN, **context)

        email = request.form.get("email", "").strip()
        password = request.form.get("password", "")
        context["email"] = email
        context["invalid"] = [name for name, value in (("email", email), ("password", password)) if not value]
        if context["invalid"]:
            context["error"] = "Email and password are required"
            return render("Sign in", LOGIN, **context), 400

        user = USERS.get(email)
        if not user or user["password"] != password:
            context["error"] = "Invalid credentials"
            return render("Sign in", LOGIN, **context), 401

        session["email"] = email
        return redirect(url_for("dashboard"))

    @app.route("/logout")
    def logout():
        session.pop("email", None)
        return redirect(url_for("login"))

    @app.route("/forgot-password")
    def forgot_password():
        return render("Forgot password", "<h1>Reset your password</h1><p>We will email you a reset link.</p>")

    @app.route("/signup", methods=["GET", "POST"])
    def signup():
        form = {key: request.form.get(key, "").strip() for key in ("firstName", "lastName", "email")}
        if request.method == "GET":
            return render("Sign up", SIGNUP, form=form, error=None)

        password = request.form.get("password", "")
        confirm = request.form.get("confirmPassword", "")
        error = None
        if not all(form.values()) or not password:
            error = "Missing required fields"
        elif not EMAIL_PATTERN.match(form["email"]):
            error = "Invalid email format"
        elif password != confirm:
            error = "Passwords do not match"
        elif form["email"] in USERS:
            error = "Email already registered"
        if error:
            return render("Sign up", SIGNUP, form=form, error=error), 400

        USERS[form["email"]] = {"id": f"usr_{secrets.token_hex(6)}", **form, "password": password}
        return redirect(url_for("login", signup=1))

    @app.route("/dashboard")
    def dashboard():
        user = USERS.get(session.get("email", ""))
        if not user:
            return redirect(url_for("login"))
        cards = load_cards()
        sections: Dict[str, List[Any]] = {}
        for card in cards:
            sections.setdefault(card.category.value, []).append(card)
        return render("Dashboard", DASHBOARD, user=user, sections=sections.items())

    @app.route("/payment", methods=["GET", "POST"])
    def payment():
        form = {key: request.form.get(key, "").strip() for key in ("cardNumber", "expiryDate", "cvv", "amount")}
        if request.method == "GET":
            return render("Payment", PAYMENT, form=form, invalid=[], error=None, success=None)

        invalid = [key for key in ("cardNumber", "expiryDate", "cvv") if not form[key]]
        if invalid:
            return render("Payment", PAYMENT, form=form, invalid=invalid, error="Please complete the card details", success=None), 400
        if form["cardNumber"] in DECLINED_CARDS:
            return render("Payment", PAYMENT, form=form, invalid=[], error="Payment declined", success=None), 402
        return render("Payment", PAYMENT, form={}, invalid=[], error=None, success="Payment successful")

    @app.route("/api-docs")
    def api_docs_page():
        return render("API Documentation", API_DOCS, endpoints=_api_endpoints())

    # ---- payments API --------------------------------------------------------------
    @app.route("/api/payments/create-intent", methods=["POST"])
    def create_payment_intent():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return _error("Invalid JSON", 400)
        amount = data.get("amount")
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            return _error("Invalid amount", 400)
        currency = data.get("currency", "usd")
        if not isinstance(currency, str):
            return _error("Invalid currency", 400)
        intent = {
            "id": f"pi_{secrets.token_hex(8)}",
            "amount": amount,
            "currency": currency,
            "status": "requires_payment_method",
        }
        PAYMENT_INTENTS[intent["id"]] = intent
        return jsonify(intent), 200

    @app.route("/api/payments/process", methods=["POST"])
    def process_payment():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return _error("Invalid JSON", 400)
        intent_id = data.get("payment_intent_id")
        if not isinstance(intent_id, str):
            return _error("Invalid payment_intent_id", 400)
        intent = PAYMENT_INTENTS.get(intent_id)
        if intent is None:
            return _error("Payment intent not found", 404)
        card_number = _object(_object(data.get("payment_method")).get("card")).get("number", "")
        if isinstance(card_number, str) and card_number in DECLINED_CARDS:
            intent["status"] = "declined"
            return jsonify({"id": intent["id"], "status": "declined", "error": "card_declined"}), 400
        intent["status"] = "succeeded"
        return jsonify({"id": intent["id"], "status": "succeeded", "amount": intent["amount"]}), 200

    @app.route("/api/payments/status", methods=["GET"])
    def payment_status():
        intent = PAYMENT_INTENTS.get(request.args.get("payment_intent_id", ""))
        if intent is None:
            return _error("Payment intent not found", 404)
        return jsonify({"id": intent["id"], "status": intent["status"], "amount": intent["amount"]}), 200

    # ---- users and auth API --------------------------------------------------------
    @app.route("/api/users", methods=["POST"])
    def create_user():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return _error("Invalid JSON", 400)
        if any(not data.get(field) for field in REQUIRED_USER_FIELDS):
            return _error("Missing required fields", 400)
        if any(not isinstance(data[field], str) for field in REQUIRED_USER_FIELDS):
            return _error("Fields must be strings", 400)
        if not EMAIL_PATTERN.match(data["email"]):
            return _error("Invalid email format", 400)
        if data["email"] in USERS:
            return _error("Email already registered", 409)
        user = {"id": f"usr_{secrets.token_hex(6)}", **{field: data[field] for field in REQUIRED_USER_FIELDS}}
        USERS[user["email"]] = user
        return jsonify(_public_user(user)), 201

    @app.route("/api/users", methods=["GET"])
    def list_users():
        if _bearer_user() is None:
            return _error("Authentication required", 401)
        return jsonify({"users": [_public_user(user) for user in USERS.values()]}), 200

    @app.route("/api/auth/login", methods=["POST"])
    def api_login():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return _error("Invalid JSON", 400)
        email, password = data.get("email"), data.get("password")
        if not isinstance(email, str) or not isinstance(password, str):
            return _error("Email and password must be strings", 400)
        user = USERS.get(email)
        if not user or user["password"] != password:
            return _error("Invalid credentials", 401)
        token = secrets.token_hex(16)
        TOKENS[token] = user["email"]
        return jsonify({"token": token, "user": _public_user(user)}), 200

    @app.route("/api/users/profile", methods=["GET"])
    def profile():
        user = _bearer_user()
        if user is None:
            return _error("Authentication required", 401)
        return jsonify(_public_user(user)), 200

    # ---- documentation API ---------------------------------------------------------
    @app.route("/api/docs", methods=["GET"])
    def api_docs():
        return jsonify({"endpoints": _api_endpoints()}), 200

    @app.route("/api/docs/openapi.json", methods=["GET"])
    def openapi():
        paths: Dict[str, Dict[str, Any]] = {}
        for endpoint in _api_endpoints():
            operation: Dict[str, Any] = {"summary": endpoint["description"], "responses": {"200": {"description": "OK"}}}
            if endpoint["requiresAuth"]:
                operation["security"] = [{"bearerAuth": []}]
            paths.setdefault(endpoint["path"], {})[endpoint["method"].lower()] = operation
        return jsonify({
            "openapi": "3.0.3",
            "info": {"title": "Board API", "version": "1.0.0"},
            "paths": paths,
            "components": {"securitySchemes": {"bearerAuth": {"type": "http", "scheme": "bearer"}}},
        }), 200

    @app.errorhandler(404)
    def not_found(_error_obj):
        if request.path.startswith("/api/"):
            return _error("Endpoint not found", 404)
        return render("Not found", "<h1>Page not found</h1>"), 404

    return app
