"""Tools operating on parsed data: query, JWT, mock data, transforms, HTTP and strings."""

from json_workbench.tools.query import query_json
from json_workbench.tools.jwt_debugger import JwtDetails, decode_jwt, is_possibly_jwt
from json_workbench.tools.mock import MockDataGenerator, SAMPLE_TEMPLATE, generate_mock_data
from json_workbench.tools.transform import run_transform
from json_workbench.tools.api_client import ApiRequest, ApiResponse, execute_request

__all__ = [
    "query_json",
    "JwtDetails",
    "decode_jwt",
    "is_possibly_jwt",
    "MockDataGenerator",
    "SAMPLE_TEMPLATE",
    "generate_mock_data",
    "run_transform",
    "ApiRequest",
    "ApiResponse",
    "execute_request",
]
