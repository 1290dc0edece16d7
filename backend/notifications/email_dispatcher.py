"""
Bulk email sending via Resend API.

Payloads are sent on a fixed-size worker pool. Submission blocks while the
pool is saturated, so a large recipient list never turns into an unbounded
backlog of pending sends. One recipient's failure never stops the others;
every outcome is collected in a DispatchResult.
"""

import threading
from concurrent.futures import Future, ThreadPoolExecutor, as_completed

import resend

from models.notification import EmailPayload
from models.run import DispatchFailure, DispatchResult
from notifications.email_renderer import build_plain_text
from notifications.error_logger import log_pipeline_error
from shared.run_context import RunContext

DEFAULT_MAX_WORKERS = 8


class BulkEmailDispatcher:
    def __init__(
        self,
        from_email: str,
        max_workers: int = DEFAULT_MAX_WORKERS,
        api_key: str | None = None,
        sender_name: str = "News Aggregator",
    ):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.from_email = from_email
        self.max_workers = max_workers
        self.sender_name = sender_name
        if api_key:
            resend.api_key = api_key

    def send_one(self, payload: EmailPayload) -> str | None:
        """Send a single email. Returns the Resend email id."""
        response = resend.Emails.send(
            {
                "from": f"{self.sender_name} <{self.from_email}>",
                "to": payload.email,
                "subject": payload.subject,
                "html": payload.body,
                "text": build_plain_text(payload.body),
            }
        )
        return response.get("id") if response else None

    def send_bulk(
        self, payloads: list[EmailPayload], context: RunContext | None = None
    ) -> DispatchResult:
        """
        Send every payload and wait for all of them.

        Args:
            payloads: Rendered emails
            context: Optional run context; once cancelled, payloads not yet
                submitted are recorded as cancelled instead of sent

        Returns:
            DispatchResult with sent, failed and cancelled recipients
        """
        result = DispatchResult()
        if not payloads:
            return result

        print(f"→ Sending {len(payloads)} email(s) with {self.max_workers} worker(s)")
        slots = threading.BoundedSemaphore(self.max_workers)
        futures: dict[Future, EmailPayload] = {}

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            for payload in payloads:
                slots.acquire()
                if context is not None and context.cancelled:
                    slots.release()
                    result.cancelled.append(payload.email)
                    continue
                future = executor.submit(self.send_one, payload)
                future.add_done_callback(lambda _: slots.release())
                futures[future] = payload

            for future in as_completed(futures):
                payload = futures[future]
                try:
                    future.result()
                except Exception as e:
                    print(f"  ✗ Failed to send to {payload.email}: {e}")
                    result.failures.append(DispatchFailure(email=payload.email, error=str(e)))
                else:
                    result.sent.append(payload.email)

        if result.failures:
            error_file = log_pipeline_error(
                error_type="dispatch",
                error_message=f"Failed to send {result.failed_count} of {len(payloads)} email(s)",
                context={
                    "failures": [(f.email, f.error) for f in result.failures],
                    "cancelled": result.cancelled,
                },
            )
            print(f"    Error details logged to: {error_file}")

        print(
            f"  ✓ Sent {result.sent_count} email(s), "
            f"{result.failed_count} failed, {len(result.cancelled)} cancelled"
        )
        return result
