"""UniThrift campus marketplace backend."""
