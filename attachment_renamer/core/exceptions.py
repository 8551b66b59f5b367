"""
Exceptions for attachment renaming.
File: attachment_renamer/core/exceptions.py
"""


class MalformedNameError(ValueError):
    """
    Raised when a name handed to the resolver breaks its input contract.
    
    This exception is raised when:
    - A candidate name has no extension
    - A duplicate-number capture cannot be parsed as an integer
    
    It signals a caller bug. Only the current rename attempt is aborted;
    batch operations record the item as failed and move on.
    """
    
    def __init__(self, name, message=None):
        self.name = name
        super().__init__(message or f"Malformed attachment name: '{name}'")


class RenameConflictError(FileExistsError):
    """
    Raised when the target of a move already exists at execution time.
    
    The resolver only suggests a name that was free when the directory was
    listed. Another rename landing on the same name before the move is
    reported with this exception for that one file.
    
    Inherits from FileExistsError as it represents a more specific
    type of "file already exists" condition with rename context.
    """
    
    def __init__(self, target, source=None, message=None):
        """
        Initialize rename conflict error.
        
        Args:
            target: Path or str of the existing target
            source: Path or str of the file that was being moved
            message: Custom error message
        """
        self.target = target
        self.source = source
        
        if message:
            super().__init__(message)
        else:
            base_msg = f"Target path already exists: {target}"
            if source:
                base_msg += f" (source: {source})"
            super().__init__(base_msg)


class SourceMissingError(FileNotFoundError):
    """Raised when the attachment to move is no longer where it was found."""
    
    def __init__(self, source):
        self.source = source
        super().__init__(f"Source path does not exist: {source}")


# End of file #
