"""REST API client for ipormac server."""

import requests
from typing import Optional


class DrillAPIClient:
    """Client for communicating with the ipormac REST API."""

    def __init__(self, base_url: str = "http://localhost:8000", site_key: Optional[str] = None):
        self.base_url = base_url.rstrip('/')
        self.site_key = site_key
        self.session = requests.Session()

    def _params(self, params: dict = None) -> dict:
        if params is None:
            params = {}
        if self.site_key:
            params['site_key'] = self.site_key
        return params

    def _get(self, endpoint: str, params: dict = None) -> dict:
        """Make a GET request."""
        response = self.session.get(f"{self.base_url}{endpoint}", params=self._params(params))
        response.raise_for_status()
        return response.json()

    def _post(self, endpoint: str, data: dict = None, params: dict = None) -> dict:
        """Make a POST request."""
        response = self.session.post(f"{self.base_url}{endpoint}", json=data,
                                     params=params)
        response.raise_for_status()
        return response.json()

    def health_check(self) -> dict:
        """Check if the server is running."""
        response = self.session.get(f"{self.base_url}/")
        response.raise_for_status()
        return response.json()

    def get_question(self) -> dict:
        """Get a new address to classify."""
        return self._get("/api/question")

    def submit_answer(self, question_id: str, answer: str) -> dict:
        """Submit an answer (option number or type name)."""
        data = {'question_id': question_id, 'answer': answer}
        if self.site_key:
            data['site_key'] = self.site_key
        return self._post("/api/answer", data)

    def get_stats(self) -> dict:
        """Get overall and per-type stats for the site."""
        return self._get("/api/stats")

    def reset_scores(self) -> dict:
        """Reset all scores for the site."""
        return self._post("/api/reset", params=self._params())

    def get_hints(self) -> dict:
        """Get address format rules."""
        return self._get("/api/hints")

    def list_sites(self) -> dict:
        """List configured sites."""
        return self._get("/api/sites")

    def check_address(self, address: str) -> dict:
        """Classify an arbitrary token."""
        return self._post("/api/check", {'address': address})
