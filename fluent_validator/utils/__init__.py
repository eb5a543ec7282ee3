"""Small helpers shared by the schema engine and the check tool."""
