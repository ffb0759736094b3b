"""SDN topology editor building blocks: controller payload decoding, device connection rules, text file helpers and an ant-colony routing client."""

__version__ = "1.0.0"