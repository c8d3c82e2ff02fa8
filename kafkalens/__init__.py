"""KafkaLens - operator console for Apache Kafka clusters."""

__version__ = "0.1.0"
