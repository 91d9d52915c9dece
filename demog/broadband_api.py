import logging
import requests
from typing import Dict, Optional, Tuple, Any
from urllib.parse import unquote

from .config import DEFAULT_TIMEOUT
from .state_data import StateRecord, GeographyResponse, DemographicResponse

logger = logging.getLogger(__name__)

Error = Dict[str, str]


def build_url(base_url: str, segment: str) -> str:
    """Append an already-encoded path segment to a base URL and ask for JSON"""
    return f"{base_url.rstrip('/')}/{segment}?format=json"


class BroadbandAPI:
    """Class to handle the broadband map census and demographic endpoints"""
    def __init__(self, state_base_url: str, demographic_base_url: str, timeout: float = DEFAULT_TIMEOUT):
        self.state_base_url = state_base_url
        self.demographic_base_url = demographic_base_url
        self.timeout = timeout
        self.headers = {
            'User-Agent': 'demog/1.0',
            'Accept': 'application/json',
            'Accept-Language': 'en-US,en;q=0.9'
        }

    @classmethod
    def from_config(cls, config) -> 'BroadbandAPI':
        return cls(config.state_base_url, config.demographic_base_url, timeout=config.timeout)

    def make_request(self, url: str) -> Tuple[Optional[Any], Optional[Error], Optional[int]]:
        """Make a GET request and decode the JSON body"""
        logger.debug(f"Making request to URL: {url}")
        try:
            response = requests.get(url, headers=self.headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            return None, {"error": f"Request failed: {e}"}, None

        logger.debug(f"Response status: {response.status_code}")
        logger.debug(f"Response content: {response.text[:500]}")  # First 500 chars

        if response.status_code != 200:
            logger.error(f"API request failed. Status code: {response.status_code}")
            return None, {"error": f"API request failed with status {response.status_code}"}, response.status_code

        try:
            return response.json(), None, None
        except ValueError as e:
            logger.error(f"Failed to parse JSON response: {e}")
            return None, {"error": "Failed to parse API response"}, response.status_code

    def get_demographics(self, fips: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error], Optional[int]]:
        """Fetch the first demographic row for a FIPS code"""
        data, error, status_code = self.make_request(build_url(self.demographic_base_url, fips))
        if error:
            return None, error, status_code

        try:
            demographic = DemographicResponse.from_json(data)
            if not demographic.rows:
                logger.error(f"No demographic data returned for FIPS {fips}")
                return None, {"error": f"No demographic data for FIPS {fips}"}, None
            row = dict(demographic.rows[0])
            row['population'] = int(row['population'])
            row['households'] = int(row['households'])
            row['medianIncome'] = float(row['medianIncome'])
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Unexpected demographic response for FIPS {fips}: {e}")
            return None, {"error": "Unexpected response format from API"}, None

        return row, None, None

    def get_state_record(self, token: str) -> Tuple[Optional[StateRecord], Optional[Error]]:
        """Run both lookups for one state and return its populated record"""
        record, error, _ = self.resolve_state(token)
        if error:
            return None, error

        row, error, _ = self.get_demographics(record.fips_code)
        if error:
            return None, error

        record.update_from_row(row)
        logger.info(f"Fetched {record.name} (FIPS {record.fips_code})")
        return record, None

    def resolve_state(self, token: str) -> Tuple[Optional[StateRecord], Optional[Error], Optional[int]]:
        """Resolve a normalized state token to a record seeded with its name and FIPS code"""
        data, error, status_code = self.make_request(build_url(self.state_base_url, token))
        if error:
            return None, error, status_code

        try:
            geography = GeographyResponse.from_json(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Unexpected geography response for {token}: {e}")
            return None, {"error": "Unexpected response format from API"}, None

        if not geography.states:
            logger.error(f"No geography matches for {token}")
            return None, {"error": f"Unrecognized state: {unquote(token)}"}, None

        match = geography.states[0]
        record = StateRecord(name=match.name or unquote(token), fips_code=match.fips)
        return record, None, None
