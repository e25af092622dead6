"""Domain services - pure logic over entities and value objects."""
