"""Team routes and models."""
