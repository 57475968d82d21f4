"""Constants for the EskomSePush API."""

DEFAULT_BASE_URL = "https://developer.sepush.co.za"
API_VERSION = "/business/2.0"

STATUS_ENDPOINT = f"{API_VERSION}/status"
AREA_INFORMATION_ENDPOINT = f"{API_VERSION}/area"
AREAS_NEARBY_ENDPOINT = f"{API_VERSION}/areas_nearby"
AREAS_SEARCH_ENDPOINT = f"{API_VERSION}/areas_search"
TOPICS_NEARBY_ENDPOINT = f"{API_VERSION}/topics_nearby"
ALLOWANCE_ENDPOINT = f"{API_VERSION}/api_allowance"

PARAM_ID = "id"
PARAM_TEST = "test"
PARAM_TEXT = "text"
PARAM_LATITUDE = "lat"
PARAM_LONGITUDE = "lon"

TOKEN_HEADER = "token"

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json;charset=utf-8",
    "User-Agent": "pyeskomsepush",
}

FIXTURE_PACKAGE = "pyeskomsepush.fixtures"

# Area names returned for test mode requests carry this prefix.
TEST_DATA_PREFIX = "TESTING"

# Schedules hold at most this many stages.
MAX_STAGE = 8
