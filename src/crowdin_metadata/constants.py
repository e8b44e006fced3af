"""Shared constants."""

# Per-document setting keys
PROJECT_ID = "crowdin-project-id"
BRANCH_ID = "crowdin-branch-id"

# Selected branch id meaning "no branch / main line"
NO_BRANCH = -1

# Plural forms in the order used to pick a display string
PLURAL_FORMS = ("one", "zero", "two", "few", "many", "other")

# Crowdin API
CROWDIN_API_URL = "https://api.crowdin.com/api/v2"
CROWDIN_ENTERPRISE_API_URL = "https://{organization}.api.crowdin.com/api/v2"
MAX_PAGE_SIZE = 500
