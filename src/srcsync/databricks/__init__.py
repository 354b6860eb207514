"""Databricks connectivity."""
