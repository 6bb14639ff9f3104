"""Core domain logic: exceptions and the route gate decision."""
