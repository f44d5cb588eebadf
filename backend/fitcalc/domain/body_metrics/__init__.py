"""Body metrics domain - anthropometric calculations."""
