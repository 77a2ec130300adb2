"""
Form submission handling: parse, check configuration, validate, forward to
Webflow, and shape the result.

Flow:
1. Parse the raw body into a SubmissionInput
2. Check that the Webflow token and collection id are configured
3. Require name and email (no Webflow call if missing)
4. Create the collection item through the item sink (single attempt)
5. Return SubmissionSuccess with the new item id

Every failure is caught here and returned as SubmissionFailure, so callers
never see an exception. Submissions are not deduplicated: posting the same
form twice creates two items.
"""

import logging
from typing import Awaitable, Callable, Optional

from formbridge.core.config import Settings
from formbridge.core.errors import FormSubmissionError
from formbridge.models.submission import (
    CmsItemPayload,
    HandlerResult,
    SubmissionFailure,
    SubmissionSuccess,
    parse_submission,
    validate_required,
)
from formbridge.services.webflow import CollectionItemSink, WebflowClient

FALLBACK_ERROR = "Failed to process form submission"


def webflow_sink_factory(settings: Settings) -> CollectionItemSink:
    api_token, collection_id = settings.require_webflow()
    return WebflowClient(api_token, collection_id, base_url=settings.webflow_api_base_url)


class FormSubmissionService:
    def __init__(
        self,
        settings: Settings,
        item_sink: Optional[CollectionItemSink] = None,
        sink_factory: Callable[[Settings], CollectionItemSink] = webflow_sink_factory,
        logger: Optional[logging.Logger] = None,
    ):
        self.settings = settings
        self.item_sink = item_sink
        self.sink_factory = sink_factory
        self.logger = logger or logging.getLogger(__name__)

    async def submit_from(self, read_body: Callable[[], Awaitable[bytes]]) -> HandlerResult:
        """Read the body with `read_body` and submit it. A failed read is a failure result too."""
        try:
            raw_body = await read_body()
        except Exception as e:
            self.logger.error(f"❌ Error reading form body: {str(e)}", exc_info=True)
            return SubmissionFailure(error=str(e) or FALLBACK_ERROR)
        return await self.submit(raw_body)

    async def submit(self, raw_body: bytes) -> HandlerResult:
        try:
            submission = parse_submission(raw_body)
            self.logger.info(
                f"📨 Received form submission: {submission.model_dump(exclude_none=True)}"
            )

            self.settings.require_webflow()
            validate_required(submission)

            payload = CmsItemPayload.from_submission(submission)
            self.logger.info(f"Creating Webflow CMS item: {payload.model_dump()}")

            sink = self.item_sink or self.sink_factory(self.settings)
            result = await sink.create_item(payload)
            self.logger.info(f"✅ Webflow CMS item created: {result}")

            item_id = result.get("id") if isinstance(result, dict) else None
            return SubmissionSuccess(itemId=None if item_id is None else str(item_id))

        except FormSubmissionError as e:
            self.logger.warning(f"⚠️ Form submission rejected: {e.message}")
            return SubmissionFailure(error=e.message or FALLBACK_ERROR)
        except Exception as e:
            self.logger.error(f"❌ Error processing form: {str(e)}", exc_info=True)
            return SubmissionFailure(error=str(e) or FALLBACK_ERROR)
