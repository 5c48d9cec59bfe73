from abc import ABC, abstractmethod
from typing import List, Union


class StorageAdapter(ABC):
    """
    Abstract base class for a key-addressed storage provider.
    This defines the filesystem contract that all storage implementations must follow.

    Operations never raise for storage errors. Failures come back as False
    (or an empty list for keys()).
    """

    @abstractmethod
    def read(self, key: str) -> Union[bytes, bool]:
        """
        Reads the content stored under a key.

        Args:
            key (str): The logical key of the file.

        Returns:
            bytes | bool: The raw content, or False on failure.
        """
        pass

    @abstractmethod
    def write(self, key: str, content: Union[bytes, str]) -> Union[int, bool]:
        """
        Stores content under a key, replacing any previous content.

        Args:
            key (str): The logical key of the file.
            content (bytes | str): The content to store.

        Returns:
            int | bool: The number of bytes stored, or False on failure.
        """
        pass

    @abstractmethod
    def exists(self, key: str) -> bool:
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        """
        Returns:
            List[str]: Every key in the store, or an empty list on failure.
        """
        pass

    @abstractmethod
    def mtime(self, key: str) -> Union[int, bool]:
        """
        Returns:
            int | bool: The modification time as a unix timestamp, or False on failure.
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        pass

    @abstractmethod
    def rename(self, source_key: str, target_key: str) -> bool:
        pass

    @abstractmethod
    def is_directory(self, key: str) -> bool:
        pass
