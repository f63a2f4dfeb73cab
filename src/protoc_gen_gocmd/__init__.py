"""protoc-gen-gocmd: command table and helper generator for protoc."""

__version__ = "1.0.0"
