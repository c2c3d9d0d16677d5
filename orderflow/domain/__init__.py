"""Domain layer - order aggregate, payment contracts, pricing and account rules."""
