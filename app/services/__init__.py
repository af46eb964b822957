"""Services for scanning, upload reading and AI integration."""

from .scanner import ScannerService
from .ai import AIService, AIServiceError, AIUnavailableError

__all__ = ["ScannerService", "AIService", "AIServiceError", "AIUnavailableError"]
