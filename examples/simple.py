"""Every severity to the terminal, with DEBUG as the minimum level."""

import nanolog
from nanolog import Severity

def main() -> None:
    nanolog.init(nanolog.GlobalConfig(level=Severity.DEBUG))

    nanolog.debug().println("debug")
    nanolog.info().println("info")
    nanolog.warn().println("warn")
    nanolog.error().println("error")
    nanolog.fatal().println("fatal")  # ends the process

    nanolog.log(Severity.DEBUG, "not showed")

if __name__ == '__main__':
    main()
