"""
Exceptions raised by Hygieia.
"""


class HygieiaError(Exception):
  """Base class for Hygieia errors."""


class KnowledgeBaseError(HygieiaError):
  """
  The condition asset is missing or malformed.

  Raised at startup; the process cannot serve queries without a knowledge base.
  """


class EmptyInputError(HygieiaError, ValueError):
  """No usable symptom phrases were supplied."""

  def __init__(self, message: str = "Please enter at least one symptom"):
    super().__init__(message)
