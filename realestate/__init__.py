"""Real-estate management service: customers, properties, categories, locations and invoices."""
