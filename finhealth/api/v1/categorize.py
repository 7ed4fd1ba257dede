"""POST /v1/categorize - Keyword categorization of a transaction description"""

from fastapi import APIRouter

from finhealth.api.v1.schemas import CategorizeRequest, CategorizeResponse
from finhealth.domain.categorization import DEFAULT_RULES, add_category_rule, auto_categorize

router = APIRouter()


@router.post("/categorize", response_model=CategorizeResponse)
def categorize(request_body: CategorizeRequest):
    """Categorize with the default rules, extended by any request-scoped rules"""
    rules = DEFAULT_RULES
    for category, keywords in request_body.extra_rules.items():
        rules = add_category_rule(rules, category, keywords)

    return CategorizeResponse(
        description=request_body.description,
        category=auto_categorize(request_body.description, rules),
    )
