from .data_structures import NO_HEAD, ROOT_ID, ROOT_TAG, InputToken, OutputToken
from .dependency import DependencyTree, DependencyTreeNode
from .errors import FormatError, IndexMismatch, InvalidInteger, MissingField
from .interfaces import BaseSentence
