import pytest

from graphdl.lexicon import LexiconLoader
from graphdl.parser import GraphDLParser


@pytest.fixture(scope="session")
def lexicon():
    return LexiconLoader().load()


@pytest.fixture(scope="session")
def graphdl_parser():
    return GraphDLParser().initialize()
