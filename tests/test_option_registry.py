import pytest
from argv_utils.errors import ArgvError, ErrorKind
from argv_utils.option import Option
from argv_utils.option_registry import OptionRegistry
from argv_utils.option_type import OptionType


def test_option_registry_register():
    registry = OptionRegistry()
    config = registry.register(Option("c", "config", option_type=OptionType.STRING))
    verbose = registry.register(Option(long="verbose", option_type=OptionType.BOOLEAN))
    debug = registry.register(Option(long="debug", option_type=OptionType.BOOLEAN))
    ratio = registry.register(Option("r", option_type=OptionType.FLOAT))
    assert len(registry) == 4
    assert len({config, verbose, debug, ratio}) == 4
    assert registry.lookup(config).flags == "-c/--config"
    assert registry.lookup(debug).flags == "--debug"
    assert registry.lookup(12345) is None
    assert registry.lookup("config") is None
    assert [option.flags for option in registry] == ["-c/--config", "--verbose", "--debug", "-r"]


def test_option_registry_duplicates():
    registry = OptionRegistry()
    registry.register(Option("h", "help", option_type=OptionType.BOOLEAN))
    with pytest.raises(ArgvError) as e:
        registry.register(Option("h", "help", option_type=OptionType.BOOLEAN))
    assert e.value.kind == ErrorKind.OPTION_ALREADY_EXISTS
    with pytest.raises(ArgvError) as e:
        registry.register(Option("h", "help", option_type=OptionType.STRING))
    assert e.value.kind == ErrorKind.SHORT_OPTION_ALREADY_EXISTS
    with pytest.raises(ArgvError) as e:
        registry.register(Option("h", option_type=OptionType.INTEGER))
    assert e.value.kind == ErrorKind.SHORT_OPTION_ALREADY_EXISTS
    with pytest.raises(ArgvError) as e:
        registry.register(Option(long="help", option_type=OptionType.BOOLEAN))
    assert e.value.kind == ErrorKind.LONG_OPTION_ALREADY_EXISTS
    assert str(e.value) == "BooleanCommandLineOptionType -h/--help: long form option already exists"
    assert len(registry) == 1


def test_option_registry_find():
    registry = OptionRegistry()
    registry.register(Option("c", "config", option_type=OptionType.STRING))
    registry.register(Option(long="verbose", option_type=OptionType.BOOLEAN))
    assert registry.find("--config").flags == "-c/--config"
    assert registry.find("-c").flags == "-c/--config"
    assert registry.find("-cxyz").flags == "-c/--config"
    assert registry.find("--verbose").flags == "--verbose"
    assert registry.find("--conf") is None
    assert registry.find("-v") is None
    assert registry.find("--") is None
    assert registry.find("-") is None
    assert registry.find("config") is None


def test_option_registry_check_mandatory():
    registry = OptionRegistry()
    registry.register(Option("a", option_type=OptionType.STRING))
    bravo = registry.lookup(registry.register(Option("b", "bravo", mandatory=True, option_type=OptionType.STRING)))
    charlie = registry.lookup(registry.register(Option("c", mandatory=True, option_type=OptionType.INTEGER)))
    with pytest.raises(ArgvError) as e:
        registry.check_mandatory()
    assert str(e.value) == "StringCommandLineOptionType -b/--bravo: mandatory option has not been set"
    bravo.add_value("x")
    with pytest.raises(ArgvError) as e:
        registry.check_mandatory()
    assert str(e.value) == "IntegerCommandLineOptionType -c: mandatory option has not been set"
    charlie.add_value("1")
    registry.check_mandatory()


def test_option_registry_lengths():
    registry = OptionRegistry()
    assert registry.max_flags_length == 0
    assert registry.max_arg_text_length == 0
    registry.register(Option("c", "config", arg_text="file path", option_type=OptionType.STRING))
    registry.register(Option(long="verbosity", arg_text="level", option_type=OptionType.INTEGER))
    assert registry.max_flags_length == len("--verbosity")
    assert registry.max_arg_text_length == len("file path")
    assert registry.as_dict() == {"-c/--config": [], "--verbosity": []}
