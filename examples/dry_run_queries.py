#!/usr/bin/env python3
"""
Example: Build PrestaShop webservice queries without sending them.

This example demonstrates:
1. Filtering, sorting and paginating a product listing
2. Creating and updating a resource from an XML payload
3. Telling query configuration errors apart

The recording webservice stands in for a real client, so no shop is needed.
Set PRESTASHOP_WEBSERVICE_URL to use your own shop URL in blank-schema queries.
"""

import logging
import os

from prestashop_webservice_extra import (
    BuilderConfig,
    ConfigurationError,
    ForbiddenActionError,
    QueryBuilder,
    RecordingWebservice,
)


logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main() -> None:
    if os.environ.get("PRESTASHOP_WEBSERVICE_URL"):
        config = BuilderConfig.from_env()
    else:
        config = BuilderConfig(url="https://shop.example.com", debug=True)

    webservice = RecordingWebservice()
    builder = QueryBuilder(webservice, config)

    # Listing: second page of active products under 100, newest first
    (
        builder.get("products")
        .display(["id", "name", "price"])
        .add_value_filter("active", 1)
        .add_interval_filter("price", 0, 100)
        .sort({"date_add": "DESC", "name": "ASC"})
        .limit(20, 20)
        .language_filter(1)
        .execute_query()
    )
    logger.info(f"Listing options: {webservice.last_call.options}")

    # Blank schema, then create and update from XML
    builder.get_blank_schema("products").execute_query()
    logger.info(f"Schema URL: {webservice.last_call.options['url']}")

    builder.add("products").send_xml("<prestashop><product/></prestashop>").execute_query()
    builder.edit("products").id(12).send_xml("<prestashop><product/></prestashop>").execute_query()
    logger.info(f"Payload keys: {[sorted(call.options) for call in webservice.calls[-2:]]}")

    # Configuration errors are raised immediately
    try:
        builder.add("products").id(5)
    except ForbiddenActionError as e:
        logger.warning(f"Rejected: {e}")
    try:
        builder.get("products").display([])
    except ConfigurationError as e:
        logger.warning(f"Rejected ({e.code.name}): {e.message}")


if __name__ == "__main__":
    main()
