"""Infrastructure layer: configuration, streaming decoders and observability."""
