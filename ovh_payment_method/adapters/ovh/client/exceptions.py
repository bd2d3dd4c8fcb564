"""
OVH API Client Exceptions.

Backend failures keep the shape the API answered with: a status code and the
decoded response body under ``data``. The adapter propagates them unchanged.
"""

from typing import Optional, Dict, Any


class OvhApiError(Exception):
  """Base exception for all OVH API errors."""

  def __init__(
    self,
    message: str,
    status: int = 0,
    data: Optional[Dict[str, Any]] = None,
  ):
    super().__init__(message)
    self.message = message
    self.status = status
    self.data = data if data is not None else {"message": message}

  def to_dict(self) -> Dict[str, Any]:
    """Convert to the ``{status, data}`` rejection shape."""
    return {"status": self.status, "data": self.data}


class OvhTransportError(OvhApiError):
  """
  The request never got an HTTP answer.

  Examples: Network timeouts, connection refused, TLS failures
  """

  pass


class OvhClientError(OvhApiError):
  """
  Client errors answered by the API.

  Examples: 400 Bad Request, 403 Forbidden, 404 Not Found
  """

  pass


class OvhServerError(OvhApiError):
  """
  Server errors answered by the API.

  Examples: 500 Internal Server Error, 503 Service Unavailable
  """

  pass
