from dsexercises.errors import InvalidArgument
from dsexercises.partition import partition
from dsexercises.random_tree import BinaryTree, build
