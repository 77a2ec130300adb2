from fastapi import Response

# Sent on every response of the form route, including preflight and failures
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def apply_cors_headers(response: Response):
    """Route dependency that stamps the fixed cross-origin headers on the response."""
    for header, value in CORS_HEADERS.items():
        response.headers[header] = value
