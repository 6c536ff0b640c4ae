# main.py
import asyncio
import logging
from storefront.app import StorefrontApp
from storefront.config import Config, setup_logging

async def main():
    # Setup logging
    setup_logging()
    logger = logging.getLogger(__name__)

    app = None
    try:
        Config.validate()

        # Connect and migrate, then report what the catalog holds
        app = StorefrontApp()
        logger.info("Starting storefront core...")
        await app.start()

        total = await app.product_query_service.count_products()
        categories = await app.category_service.get_all_categories()
        logger.info(f"Catalog ready: {total} products in {len(categories)} categories")
    except Exception as e:
        logger.error(f"Error starting storefront core: {e}", exc_info=True)
        raise
    finally:
        if app is not None:
            await app.stop()

if __name__ == "__main__":
    asyncio.run(main())
