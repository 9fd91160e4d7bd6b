"""Settings, logging, errors, results, security and database helpers."""
