"""
Request statistics for outbound model and speech calls.
"""
import time
import logging
from collections import defaultdict
from typing import Dict, Any

logger = logging.getLogger(__name__)

class RequestMonitor:
    """Monitor and track outbound request statistics per service."""

    def __init__(self):
        self.total_requests = defaultdict(int)
        self.failed_requests = defaultdict(int)
        self.total_tokens_used = 0
        self.request_times = []
        self.start_time = time.time()

    def record_request(self, service: str, success: bool, response_time: float, tokens: int = 0):
        """Record a completed request."""
        self.total_requests[service] += 1
        if not success:
            self.failed_requests[service] += 1
        self.total_tokens_used += tokens
        self.request_times.append(response_time)

        # Keep only last 100 response times for moving average
        if len(self.request_times) > 100:
            self.request_times.pop(0)

    def get_stats(self) -> Dict[str, Any]:
        """Get current statistics."""
        total = sum(self.total_requests.values())
        failed = sum(self.failed_requests.values())
        return {
            'total_requests': total,
            'llm_requests': self.total_requests['llm'],
            'tts_requests': self.total_requests['tts'],
            'success_rate': ((total - failed) / max(1, total)) * 100,
            'tokens_used': self.total_tokens_used,
            'avg_response_time': sum(self.request_times) / max(1, len(self.request_times)),
            'elapsed': time.time() - self.start_time,
        }

    def log_status(self):
        """Log current status."""
        stats = self.get_stats()
        logger.info(
            f"API Stats: {stats['llm_requests']} llm reqs, "
            f"{stats['tts_requests']} tts reqs, "
            f"{stats['success_rate']:.1f}% success, "
            f"{stats['tokens_used']} tokens, "
            f"{stats['avg_response_time']:.2f}s avg, "
            f"{stats['elapsed']:.0f}s elapsed"
        )
