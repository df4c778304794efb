"""Guestbook HTTP client.

A small wrapper around the guestbook's HTTP surface, used to
smoke‑test a deployed instance (for example right after a container
rollout).  The client uses the ``requests`` library and exposes:

* :meth:`GuestbookClient.post_message` – submit a message through the form.
* :meth:`GuestbookClient.list_messages` – read the log from ``/messages``.
* :meth:`GuestbookClient.health` – query ``/health``.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or ``False``) and
``error`` is a dictionary with ``status_code`` and ``message`` keys.

Command line usage::

    python guestbook_client.py --url http://localhost:8080 post "Hello!"
    python guestbook_client.py --url http://localhost:8080 list
    python guestbook_client.py --url http://localhost:8080 health

The command exits with status 0 on success and 1 on failure.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

REDIRECT_CODES = {301, 302, 303, 307, 308}


class GuestbookClient:
    """Client for a running guestbook service."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Root URL of the service, e.g. ``http://localhost:8080``.
            timeout: Per‑request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs: Any) -> Tuple[Optional[requests.Response], Optional[Dict[str, Any]]]:
        """Send a request and return ``(response, error)``.

        Redirects are never followed, so a successful form submission
        comes back as the redirect itself.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                timeout=self.timeout,
                allow_redirects=False,
                **kwargs,
            )
        except requests.RequestException as exc:
            logger.error("Guestbook request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        return response, None

    @staticmethod
    def _error(response: requests.Response) -> Dict[str, Any]:
        message = response.text or response.reason or ""
        logger.error("Guestbook request failed (%s): %s", response.status_code, message)
        return {"status_code": response.status_code, "message": message}

    def post_message(self, text: str) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Submit ``text`` through the form.

        The service redirects after every submission, including
        rejected blank ones, so ``True`` only means the request was
        accepted; use :meth:`list_messages` to confirm the append.
        """
        response, error = self._request("POST", "/", data={"message": text})
        if error:
            return False, error
        if response.status_code in REDIRECT_CODES:
            return True, None
        return False, self._error(response)

    def list_messages(self) -> Tuple[List[str], Optional[Dict[str, Any]]]:
        """Return the stored messages in log order."""
        response, error = self._request("GET", "/messages")
        if error:
            return [], error
        if response.status_code != 200:
            return [], self._error(response)
        try:
            items = response.json()
        except ValueError as exc:
            logger.error("Unexpected response from /messages: %s", exc)
            return [], {"status_code": response.status_code, "message": "Invalid JSON response"}
        return [item["content"] for item in items], None

    def health(self) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Return whether the service reports itself healthy."""
        response, error = self._request("GET", "/health")
        if error:
            return False, error
        if response.status_code != 200:
            return False, self._error(response)
        return True, None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Talk to a running guestbook service")
    parser.add_argument("--url", default="http://localhost:80", help="Base URL of the guestbook")
    parser.add_argument("--timeout", type=float, default=15, help="Request timeout in seconds")
    sub = parser.add_subparsers(dest="command", required=True)
    post = sub.add_parser("post", help="Submit a message")
    post.add_argument("text")
    sub.add_parser("list", help="Print all stored messages")
    sub.add_parser("health", help="Check the service health endpoint")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    client = GuestbookClient(base_url=args.url, timeout=args.timeout)

    if args.command == "post":
        ok, error = client.post_message(args.text)
    elif args.command == "list":
        messages, error = client.list_messages()
        ok = error is None
        for message in messages:
            print(message)
    else:
        ok, error = client.health()
        if ok:
            print("ok")

    if not ok:
        print(f"Error: {error['message'] if error else 'unknown'}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
