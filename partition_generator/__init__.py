from partition_generator.StreamingIterator import StreamingIterator
from partition_generator.Partitions import Partitions, PartitionView
from partition_generator.partition_counting import partition_number, count_partitions, list_partitions, check_partitions

__version__ = "0.1.0"
