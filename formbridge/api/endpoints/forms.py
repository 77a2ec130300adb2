"""
Form submission endpoint.

The route accepts the common methods so it can answer preflight requests and
wrong-method calls with a JSON body instead of a bare 405. Any other verb is
answered the same way by the 405 handler in formbridge.api.error_handlers. Cross-origin
headers are added to every response by the router dependency. Failures are
signalled in the body only; the status code stays 200.
"""

import logging

from fastapi import APIRouter, Depends, Request

from formbridge.core.config import Settings, get_settings
from formbridge.core.cors import apply_cors_headers
from formbridge.services.form_submission import FormSubmissionService

router = APIRouter(dependencies=[Depends(apply_cors_headers)])
logger = logging.getLogger(__name__)

ROUTE_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]
METHOD_NOT_ALLOWED = {"success": False, "error": "Method not allowed. Use POST."}


def get_form_submission_service(settings: Settings = Depends(get_settings)) -> FormSubmissionService:
    return FormSubmissionService(settings)


@router.api_route("/submit-form", methods=ROUTE_METHODS)
async def submit_form(
    request: Request,
    service: FormSubmissionService = Depends(get_form_submission_service),
):
    logger.info(f"=== INCOMING REQUEST === {request.method} {request.url.path}")

    if request.method == "OPTIONS":
        logger.debug("OPTIONS request - returning empty response")
        return {}

    if request.method != "POST":
        logger.info(f"Method not allowed: {request.method}")
        return METHOD_NOT_ALLOWED

    result = await service.submit_from(request.body)
    # itemId is left out rather than sent as null when Webflow returns no id
    return result.model_dump(exclude_none=True)
