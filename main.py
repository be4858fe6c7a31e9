"""
Command line front end for the memorable password generator,
preferences kept in an ini file
"""

__version__ = "0.1.0"
__license__ = "MIT"

import os
import sys
from configparser import ConfigParser

import typer

from passwordGenerator import (CapitaliseMode, InvalidConfiguration, MemorablePassword,
                               WordlistMode, demo as passwordDemo)

app = typer.Typer()

SECTION = "PASSWORD_PREFERENCE"
DEFAULTS = {
    "numdigits": "3",
    "capitalisemode": CapitaliseMode.NONE.value,
    "wordlistmode": WordlistMode.ABSTRACT_ONLY.value,
}


class PassCfg:
    def __init__(self, configfile, verbose=False):
        self.configfile = configfile
        self.verbose = verbose

    def _read(self):
        config = ConfigParser()
        try:
            with open(self.configfile) as conf:
                config.read_file(conf)
        except (OSError, IOError) as e:
            raise Exception(f"Couldn't find path to {self.configfile}.") from e
        return config

    def set_config(self, section, key, value):
        config = self._read()
        if not config.has_section(section):
            config.add_section(section)
        config[section][key] = value
        with open(self.configfile, 'w') as conf:
            config.write(conf)
        if self.verbose:
            print(f"  SET config[{section}, {key}] = {value}", file=sys.stderr)

    def get_config(self, section, key):
        value = self._read().get(section, key)
        if self.verbose:
            print(f"  GET config[{section}, {key}] = {value}", file=sys.stderr)
        return value

    def list_config(self):
        config = self._read()
        print(f"\n--- Configuration ---")
        print(f"Contents of config file: {self.configfile}")
        for section in config.sections():
            print(f"    {section}")
            for key in config[section]:
                _value = config.get(section, key)
                value = _value if _value else '-NULL-'
                print(f"        {key} :   {value}")
            print()

    def check_config(self):
        '''
        Create config file and PASSWORD_PREFERENCE section with defaults if NOT there
        '''
        config = ConfigParser()
        if os.path.exists(self.configfile):
            config = self._read()
        if not config.has_section(SECTION):
            config.add_section(SECTION)
        for key, value in DEFAULTS.items():
            if not config.has_option(SECTION, key):
                config.set(SECTION, key, value)
                if self.verbose:
                    print(f"  DEFAULT config[{SECTION}, {key}] = {value}", file=sys.stderr)
        with open(self.configfile, 'w') as conf:
            config.write(conf)

    def __repr__(self):
        return f"<Cfg file: {self.configfile}>"


def buildGenerator(cfgfile, numdigits=None, capitalise='', wordlist='', verbose=False):
    """
    Build a generator from cfgfile preferences,
        non-empty arguments take precedence over the file
    """
    cfg = PassCfg(cfgfile, verbose)
    cfg.check_config()
    if numdigits is None:
        try:
            numdigits = int(cfg.get_config(SECTION, "numdigits"))
        except ValueError as e:
            raise InvalidConfiguration(f"numdigits in {cfgfile} is not an integer") from e
    capitalise = capitalise or cfg.get_config(SECTION, "capitalisemode")
    wordlist = wordlist or cfg.get_config(SECTION, "wordlistmode")
    return MemorablePassword(numdigits, capitalise, wordlist, verbose=verbose)


def configError(e):
    print(f"!!! Invalid configuration: {e} !!!", file=sys.stderr)
    sys.exit(98)


@app.command()
def init(cfgfile: str='config.ini', listcfg: bool=True):
    """
    Create config file with default preferences if it does not exist, and
    list config file
    """
    cfg = PassCfg(cfgfile)
    cfg.check_config()
    if listcfg:
        cfg.list_config()


@app.command()
def showconfig(cfgfile: str='config.ini'):
    """
    Display the preferences in cfgfile
    """
    init(cfgfile=cfgfile, listcfg=True)


@app.command()
def generate(cfgfile: str='config.ini', count: int=1,
             numdigits: int=None, capitalise: str='', wordlist: str='',
             verbose: bool=False):
    """
    Print memorable passwords, options override cfgfile preferences
    """
    try:
        generator = buildGenerator(cfgfile, numdigits, capitalise, wordlist, verbose)
        for i in range(count):
            print(generator.generate())
    except InvalidConfiguration as e:
        configError(e)


@app.command()
def word(cfgfile: str='config.ini', limit: int=0, count: int=1,
         capitalise: str='', wordlist: str='', verbose: bool=False):
    """
    Print single words without digits, at most limit characters long (0 for no limit)
    """
    try:
        generator = buildGenerator(cfgfile, None, capitalise, wordlist, verbose)
        for i in range(count):
            print(generator.get_word(limit))
    except InvalidConfiguration as e:
        configError(e)


@app.command()
def setdigits(numdigits: int, cfgfile: str='config.ini'):
    """
    Set number of digits in the numeric part
    """
    try:
        MemorablePassword().set_num_digits(numdigits)
    except InvalidConfiguration as e:
        configError(e)
    cfg = PassCfg(cfgfile, verbose=True)
    cfg.check_config()
    cfg.set_config(SECTION, "numdigits", str(numdigits))


@app.command()
def setcapitalise(mode: str, cfgfile: str='config.ini'):
    """
    Set capitalise mode: none, one or some
    """
    try:
        MemorablePassword().set_capitalise_mode(mode)
    except InvalidConfiguration as e:
        configError(e)
    cfg = PassCfg(cfgfile, verbose=True)
    cfg.check_config()
    cfg.set_config(SECTION, "capitalisemode", mode)


@app.command()
def setwordlist(mode: str, cfgfile: str='config.ini'):
    """
    Set wordlist mode: all, abstract_words_only, uk_only, worldwide_only,
    all_locations or not_abstract
    """
    try:
        MemorablePassword().set_wordlist_mode(mode)
    except InvalidConfiguration as e:
        configError(e)
    cfg = PassCfg(cfgfile, verbose=True)
    cfg.check_config()
    cfg.set_config(SECTION, "wordlistmode", mode)


@app.command()
def demo():
    """
    Print sample passwords for every mode
    """
    passwordDemo()


if __name__ == "__main__":
    app()
