"""Mixed storefront and admin workload.

This is the recommended scenario for a load baseline.
"""

from locust import HttpUser, between

from loadtests.scenarios.admin import CatalogueAdminJourney, DeliveryPricingJourney, OrderDeskJourney
from loadtests.scenarios.storefront import BrowseAndCheckoutJourney, WindowShopper


class MixedWorkloadUser(HttpUser):
    """Realistic traffic: mostly anonymous shoppers, a few admins.

    Storefront (85%):
    - Window shopping: most common
    - Browse and checkout: the conversion path, exercising atomic order placement

    Admin (15%):
    - Order desk: status updates while orders keep arriving
    - Catalogue edits: product creation and repricing
    - Delivery pricing: rare
    """

    wait_time = between(0.5, 3.0)
    tasks = {
        WindowShopper: 50,
        BrowseAndCheckoutJourney: 35,
        OrderDeskJourney: 8,
        CatalogueAdminJourney: 5,
        DeliveryPricingJourney: 2,
    }
