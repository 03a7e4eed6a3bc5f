import base64
import logging

import requests

from gameroom import config
from gameroom.exceptions import BatchSubmitError, RequestFailedError, ServerError

LOGGER = logging.getLogger(__name__)

OCTET_STREAM = {"Content-Type": "application/octet-stream"}

CLIENT_ERROR_MESSAGE = (
    "Failed to send request. Contact the administrator for help.")
SERVER_ERROR_MESSAGE = (
    "The Gameroom server has encountered an error. "
    "Please contact the administrator.")


def _error_message(response):
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return body.get("message", response.text)
    return response.text


def http(method, path, data=None, headers=None, base_url=None):
    """Send a request to the gameroom daemon and return the response body."""
    url = f"{base_url or config.GAMEROOM_URL}{path}"
    try:
        r = requests.request(
            method, url, data=data, headers=headers,
            timeout=config.REQUEST_TIMEOUT)
    except requests.RequestException as e:
        LOGGER.error("%s %s failed: %s", method, url, e)
        raise ServerError(SERVER_ERROR_MESSAGE) from e

    if 200 <= r.status_code < 300:
        return r.content

    LOGGER.error("%s %s returned %s: %s",
                 method, url, r.status_code, _error_message(r))
    if 400 <= r.status_code < 500:
        raise RequestFailedError(CLIENT_ERROR_MESSAGE)
    raise ServerError(SERVER_ERROR_MESSAGE)


def submit_batch(batch_list_bytes, circuit_id, base_url=None):
    body = http("POST", f"/gamerooms/{circuit_id}/batches",
                data=batch_list_bytes, headers=OCTET_STREAM,
                base_url=base_url)
    LOGGER.info("Batch submitted to gameroom %s", circuit_id)
    return body


def submit_payload(payload_bytes, base_url=None):
    """Forward an already signed admin payload."""
    return http("POST", "/submit", data=payload_bytes, headers=OCTET_STREAM,
                base_url=base_url)


def submit_scabbard_batch(batch_list_bytes, circuit_id, service_id,
                          splinterd_url=None):
    url = (f"{splinterd_url or config.SPLINTERD_URL}"
           f"/scabbard/{circuit_id}/{service_id}/batches")
    headers = {
        "SplinterProtocolVersion": str(config.SCABBARD_PROTOCOL_VERSION),
    }
    try:
        r = requests.post(url, data=batch_list_bytes, headers=headers,
                          timeout=config.REQUEST_TIMEOUT)
    except requests.RequestException as e:
        raise BatchSubmitError(
            f"The client encountered an error {e}") from e

    if r.status_code != 202:
        raise BatchSubmitError(
            f"The server returned an error. Status: {r.status_code}, "
            f"{r.text}")


def submit_to_validator(batch_list_bytes, rest_api=None):
    """POST a batch list to a plain Sawtooth REST API."""
    url = f"{rest_api or config.SAWTOOTH_REST_API}/batches"
    try:
        r = requests.post(url, data=batch_list_bytes, headers=OCTET_STREAM,
                          timeout=config.REQUEST_TIMEOUT)
    except requests.RequestException as e:
        raise BatchSubmitError(
            f"The client encountered an error {e}") from e

    LOGGER.info("Sawtooth status: %s", r.status_code)
    if r.status_code >= 400:
        raise BatchSubmitError(
            f"The server returned an error. Status: {r.status_code}, "
            f"{_error_message(r)}")
    return r.json()


def read_state(address, rest_api=None):
    url = f"{rest_api or config.SAWTOOTH_REST_API}/state/{address}"
    try:
        r = requests.get(url, timeout=config.REQUEST_TIMEOUT)
    except requests.RequestException as e:
        raise ServerError(SERVER_ERROR_MESSAGE) from e

    if r.status_code == 404:
        return None
    if r.status_code >= 400:
        LOGGER.error("GET %s returned %s: %s",
                     url, r.status_code, _error_message(r))
        raise RequestFailedError(CLIENT_ERROR_MESSAGE)
    return base64.b64decode(r.json()["data"])
