"""Main entry point for the rewards dashboard"""

from pathlib import Path
from dotenv import load_dotenv

# Load environment variables FIRST, before any other imports
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

from rewards.orchestrator.dashboard import RewardsDashboard
from rewards.utils.logging import get_logger

logger = get_logger(__name__)


def main():
    """Main entry point"""
    logger.info("=" * 60)
    logger.info("CUSTOMER REWARDS PROGRAM - Points Dashboard")
    logger.info("=" * 60)

    try:
        dashboard = RewardsDashboard()
        dashboard.load()
        results = dashboard.summary()

        logger.info(f"Session ID: {results['session_id']}")
        logger.info(f"Customers: {results['total_customers']}")
        logger.info(f"Transactions: {results['total_transactions']}")
        logger.info(f"Total Points: {results['total_points']}")
        logger.info(f"Total Spent: ${results['total_spent']:,.2f}")
        logger.info(f"Average Purchase: ${results['average_purchase']:,.2f}")
        if results['highest_spender']:
            logger.info(
                f"Top Customer: {results['highest_spender']} "
                f"({results['highest_spender_points']} pts)"
            )

        logger.info("-" * 60)
        for trend in results['monthly_trends']:
            logger.info(f"{trend['month']}: {trend['transactions']} transactions, {trend['points']} pts")

        logger.info("-" * 60)
        for customer in results['customers']:
            logger.info(f"{customer['name']}: {customer['points']} pts (${customer['spent']:,.2f})")
        logger.info("=" * 60)

        return results

    except Exception as e:
        logger.error(f"Dashboard run failed: {e}")
        raise


if __name__ == "__main__":
    main()
