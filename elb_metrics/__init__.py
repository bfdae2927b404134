"""Poll CloudWatch for ELB metrics and emit them in Graphite plaintext format."""

__version__ = "0.1.0"
