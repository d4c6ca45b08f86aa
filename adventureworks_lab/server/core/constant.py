"""Application constants."""

PROJECT_NAME = "AdventureWorks-Lab"

API_V1_STR = "/api/v1"

# Fixed page size of the AdventureWorks demo endpoints.
ADVENTUREWORKS_TAKE = 10
