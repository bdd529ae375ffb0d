"""
FastAPI Web Application - Review Link Generator
================================================

One page with a business search box, plus the JSON endpoints it talks to:

    GET /                            search page
    GET /api/places/autocomplete     proxy to Google Places Autocomplete
    GET /api/review-link             build a review link server-side

The Google Maps key is attached here, server-side; the page never sees it.
"""

import json
import logging
from typing import List, Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from review_link.domain import ReviewLinkAppError, build_review_link
from review_link.infrastructure.config import Settings, get_settings
from review_link.infrastructure.places import PlacesClient, PlacesUpstreamError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ── Globals ────────────────────────────────────────────────────────
places_client: Optional[PlacesClient] = None


def _get_places_client() -> PlacesClient:
    """Shared client; created on first use when the lifespan hook did not run."""
    global places_client
    if places_client is None:
        places_client = PlacesClient(get_settings())
    return places_client


# ── Lifespan ───────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    global places_client
    settings = get_settings()
    for issue in settings.validate():
        logger.warning(issue)
    places_client = PlacesClient(settings)
    logger.info("Places client ready")
    yield
    places_client.close()
    places_client = None


app = FastAPI(title="Review Link Generator", description="Google review link builder", lifespan=lifespan)


# ── Schemas ────────────────────────────────────────────────────────

class Suggestion(BaseModel):
    description: str
    place_id: str


class ReviewLinkResponse(BaseModel):
    place_id: str
    review_link: str


# ── Error responses ────────────────────────────────────────────────

@app.exception_handler(ReviewLinkAppError)
async def app_error_handler(request: Request, exc: ReviewLinkAppError):
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


# ══════════════════════════════════════════════════════════════════
#  PAGE
# ══════════════════════════════════════════════════════════════════

PAGE_CSS = """
    :root {
        --bg: #f3f4f6;
        --card: #ffffff;
        --border: #d1d5db;
        --text: #1f2937;
        --muted: #6b7280;
        --main: #1a73e8;
    }

    * { margin: 0; padding: 0; box-sizing: border-box; }

    body {
        font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
        background: var(--bg);
        color: var(--text);
        min-height: 100vh;
        display: flex; align-items: center; justify-content: center;
        padding: 24px;
    }

    .card {
        background: var(--card);
        border: 1px solid var(--border);
        border-radius: 10px;
        width: 100%; max-width: 720px;
        padding: 40px 48px;
    }
    .card h1 { font-size: 26px; margin-bottom: 24px; }
    .card label { display: block; font-weight: 700; font-size: 20px; margin: 28px 0 12px; }

    .row { display: flex; gap: 8px; border: 3px solid var(--main); padding-left: 16px; }
    .row input { flex: 4; border: none; font-size: 14px; outline: none; }
    .row button {
        flex: 1; padding: 12px; border: none; cursor: pointer;
        background: var(--main); color: #fff; font-weight: 600; font-size: 16px;
    }
    .row button:disabled { opacity: 0.6; cursor: wait; }

    .search { position: relative; }
    .suggestions {
        position: absolute; z-index: 10; left: 0; right: 0;
        list-style: none; margin-top: 4px;
        background: var(--card); border: 1px solid var(--border); border-radius: 6px;
        max-height: 240px; overflow-y: auto;
        display: none;
    }
    .suggestions.open { display: block; }
    .suggestions li { padding: 8px 16px; font-size: 14px; cursor: pointer; }
    .suggestions li:hover { background: var(--bg); }

    .notice { color: var(--muted); font-size: 13px; margin-top: 8px; min-height: 18px; }
"""


def render_search_page(settings: Settings) -> str:
    """Render the search page; search rules come from settings so page and proxy agree."""
    template = json.dumps(settings.review.review_url_template)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Business Link Generator</title>
    <meta name="description" content="Generate business links">
    <style>
        {PAGE_CSS}
    </style>
</head>
<body>
    <div class="card">
        <h1>Google Review Link Generator</h1>

        <div class="search" id="search">
            <div class="row">
                <input type="text" id="business-input" placeholder="Enter business name..." autocomplete="off">
                <button type="button" id="generate-btn">Generate</button>
            </div>
            <ul class="suggestions" id="suggestions"></ul>
        </div>
        <div class="notice" id="notice"></div>

        <label for="review-link">Your Google review link is:</label>
        <div class="row">
            <input type="text" id="review-link" placeholder="Link will appear here..." readonly>
        </div>
    </div>
    <script>
        const MIN_QUERY_LENGTH = {settings.ui.min_query_length};
        const DEBOUNCE_MS = {settings.ui.debounce_ms};
        const REVIEW_URL_TEMPLATE = {template};

        const input       = document.getElementById('business-input');
        const list        = document.getElementById('suggestions');
        const searchBox   = document.getElementById('search');
        const generateBtn = document.getElementById('generate-btn');
        const linkOutput  = document.getElementById('review-link');
        const notice      = document.getElementById('notice');

        let suggestions = [];
        let placeId = '';
        let latestRequest = 0;

        // A new call within the window replaces the pending one
        function debounce(fn, wait) {{
            let timeout;
            return function(...args) {{
                clearTimeout(timeout);
                timeout = setTimeout(() => fn.apply(this, args), wait);
            }};
        }}

        function showSuggestions(open) {{
            list.classList.toggle('open', open && suggestions.length > 0);
        }}

        function renderSuggestions() {{
            list.innerHTML = '';
            suggestions.forEach(s => {{
                const li = document.createElement('li');
                li.textContent = s.description;
                li.addEventListener('click', () => selectSuggestion(s));
                list.appendChild(li);
            }});
            showSuggestions(true);
        }}

        function setLoading(loading) {{
            generateBtn.disabled = loading;
            generateBtn.textContent = loading ? '...' : 'Generate';
        }}

        async function fetchSuggestions(query) {{
            if (!query || query.trim().length < MIN_QUERY_LENGTH) {{
                // Invalidate any request still in flight for the longer query
                latestRequest++;
                setLoading(false);
                suggestions = [];
                showSuggestions(false);
                return;
            }}
            const requestId = ++latestRequest;
            setLoading(true);
            try {{
                const resp = await fetch('/api/places/autocomplete?input=' + encodeURIComponent(query));
                if (!resp.ok) throw new Error('HTTP ' + resp.status);
                const data = await resp.json();
                if (requestId !== latestRequest) return;
                suggestions = data;
                renderSuggestions();
            }} catch (err) {{
                console.error('Error fetching suggestions:', err);
                if (requestId !== latestRequest) return;
                suggestions = [];
                showSuggestions(false);
            }} finally {{
                if (requestId === latestRequest) setLoading(false);
            }}
        }}

        const debouncedFetch = debounce(fetchSuggestions, DEBOUNCE_MS);

        function selectSuggestion(s) {{
            input.value = s.description;
            placeId = s.place_id;
            suggestions = [];
            showSuggestions(false);
            linkOutput.value = '';
            notice.textContent = '';
        }}

        function buildReviewLink(id) {{
            return REVIEW_URL_TEMPLATE.replace('{{place_id}}', encodeURIComponent(id));
        }}

        input.addEventListener('input', () => debouncedFetch(input.value));
        input.addEventListener('focus', () => showSuggestions(true));

        generateBtn.addEventListener('click', () => {{
            if (!placeId) {{
                notice.textContent = 'Please select a business from the suggestions first.';
                return;
            }}
            notice.textContent = '';
            linkOutput.value = buildReviewLink(placeId);
        }});

        document.addEventListener('mousedown', e => {{
            if (!searchBox.contains(e.target)) showSuggestions(false);
        }});
    </script>
</body>
</html>"""


# ══════════════════════════════════════════════════════════════════
#  ROUTES
# ══════════════════════════════════════════════════════════════════

@app.get("/", response_class=HTMLResponse)
async def search_page():
    return render_search_page(get_settings())


# ── API Endpoints ──────────────────────────────────────────────

@app.get("/api/places/autocomplete", response_model=List[Suggestion])
def places_autocomplete(input: Optional[str] = None):
    """Proxy a search box query to Google Places; returns description/place_id pairs."""
    client = _get_places_client()
    try:
        suggestions = client.autocomplete(input or "")
    except ReviewLinkAppError:
        raise
    except Exception as e:
        logger.exception(f"Error fetching autocomplete suggestions: {e}")
        raise PlacesUpstreamError("Internal server error")
    return [s.to_dict() for s in suggestions]


@app.get("/api/review-link", response_model=ReviewLinkResponse)
async def get_review_link(place_id: Optional[str] = None):
    settings = get_settings()
    link = build_review_link(place_id, settings.review.review_url_template)
    return {"place_id": place_id.strip(), "review_link": link}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
