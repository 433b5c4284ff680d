"""
Azure Service Analyzers.

Importing this package registers every Azure analyzer with the registry.
"""
from .cosmosdb import CosmosDBAnalyzer
from .signalr import SignalRAnalyzer
from .webpubsub import WebPubSubAnalyzer
from .redis import RedisAnalyzer
from .servicebus import ServiceBusAnalyzer

__all__ = [
    "CosmosDBAnalyzer",
    "SignalRAnalyzer",
    "WebPubSubAnalyzer",
    "RedisAnalyzer",
    "ServiceBusAnalyzer",
]
