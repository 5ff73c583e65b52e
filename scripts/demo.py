"""Runs the storefront demo: adds a sword to an empty cart and logs the results."""
from mart.main import main


main()
