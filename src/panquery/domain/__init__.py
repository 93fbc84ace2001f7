"""Pure domain logic: handles, orientation, sequences, and query result types."""
