"""
First-run population of sample data

Each collection is only seeded while it is empty, so running this on every
startup is safe.
"""
import logging
from typing import Any, Awaitable, Callable, Dict, List

from ..database import GRIEVANCES, MARKETPLACE_LISTINGS, SCHEMES, USERS
from ..models.common import get_current_utc_time
from ..utils.security import hash_password_async
from .mongo_service import MongoService

logger = logging.getLogger(__name__)

SAMPLE_PASSWORD = "password"

SAMPLE_SCHEMES = [
    {
        "name": "Educational Grant",
        "description": "Financial assistance for children's education.",
        "eligibility": "All ranks, minimum 2 years service",
        "category": "Education"
    },
    {
        "name": "Medical Aid for Dependents",
        "description": "Coverage for medical expenses of family members.",
        "eligibility": "All ranks",
        "category": "Health"
    },
    {
        "name": "Housing Subsidy",
        "description": "Support for home purchase or construction.",
        "eligibility": "Officers and JCOs, minimum 10 years service",
        "category": "Housing"
    },
    {
        "name": "Directorate General Resettlement (DGR) Schemes",
        "description": "Promotes resettlement opportunities for ex-servicemen through training and employment initiatives.",
        "eligibility": "Ex-servicemen seeking employment or entrepreneurial opportunities.",
        "category": "Resettlement"
    }
]

SAMPLE_LISTINGS = [
    {
        "userId": "admin@example.com",
        "type": "book",
        "title": "Old Engineering Textbooks",
        "description": "Collection of engineering textbooks. Good condition.",
        "contactInfo": "admin@example.com"
    },
    {
        "userId": "officer@example.com",
        "type": "housing",
        "title": "2BHK Apartment for Rent",
        "description": "Spacious 2BHK apartment near cantonment area. Available from next month.",
        "contactInfo": "officer@example.com"
    }
]

SAMPLE_GRIEVANCES = [
    {
        "userId": "family@example.com",
        "subject": "Delay in Pension Disbursement",
        "details": "My father's pension has been delayed for the last two months. Need urgent assistance.",
        "priority": "high",
        "status": "Open"
    },
    {
        "userId": "officer@example.com",
        "subject": "Issue with ECHS Card Renewal",
        "details": "Facing problems with ECHS card renewal online portal. It shows an error every time.",
        "priority": "medium",
        "status": "Open"
    }
]

SAMPLE_USERS = [
    {"email": "admin@example.com", "role": "admin"},
    {"email": "officer@example.com", "role": "officer"},
    {"email": "family@example.com", "role": "family"}
]


async def build_sample_schemes() -> List[Dict[str, Any]]:
    now = get_current_utc_time()
    return [{**scheme, "createdAt": now} for scheme in SAMPLE_SCHEMES]


async def build_sample_listings() -> List[Dict[str, Any]]:
    now = get_current_utc_time()
    return [{**listing, "postedAt": now} for listing in SAMPLE_LISTINGS]


async def build_sample_grievances() -> List[Dict[str, Any]]:
    now = get_current_utc_time()
    return [{**grievance, "filedAt": now} for grievance in SAMPLE_GRIEVANCES]


async def build_sample_users() -> List[Dict[str, Any]]:
    users = []
    for user in SAMPLE_USERS:
        # each user gets its own salt
        hashed = await hash_password_async(SAMPLE_PASSWORD)
        users.append({**user, "password": hashed, "createdAt": get_current_utc_time()})
    return users


SEED_PLAN: List[tuple] = [
    (SCHEMES, build_sample_schemes, "schemes"),
    (MARKETPLACE_LISTINGS, build_sample_listings, "marketplace listings"),
    (GRIEVANCES, build_sample_grievances, "grievances"),
    (USERS, build_sample_users, "dummy users"),
]


async def seed_collection(
    mongo: MongoService,
    collection: str,
    build: Callable[[], Awaitable[List[Dict[str, Any]]]],
    label: str
) -> int:
    """Insert sample rows into one collection if it is empty"""
    count = await mongo.count_documents(collection)
    if count > 0:
        logger.debug(f"Skipping {label}: {count} existing rows")
        return 0

    inserted = await mongo.insert_documents(collection, await build())
    logger.info(f"Initial {label} populated ({inserted} rows)")
    return inserted


async def populate_initial_data(mongo: MongoService) -> Dict[str, int]:
    """
    Seed every empty collection

    A failure in one collection is logged and does not stop the others.

    Returns:
        Rows inserted per collection name
    """
    results = {}
    for collection, build, label in SEED_PLAN:
        try:
            results[collection] = await seed_collection(mongo, collection, build, label)
        except Exception as e:
            logger.error(f"Error populating initial {label}: {e}")
            results[collection] = 0
    return results
