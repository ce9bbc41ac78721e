"""Route DEBUG output to a file instead of standard output."""

import nanolog
from nanolog import Severity

def main() -> None:
    try:
        f = open('test.log', 'a')
    except OSError as e:
        nanolog.fatal().printf("file error: %s", e)

    with f:
        nanolog.no_color()
        nanolog.init(nanolog.GlobalConfig(
            level=Severity.DEBUG,
            # File writer overrides default writer
            debug=nanolog.LevelOverride(writer=f),
        ))
        nanolog.debug().println("debug")

if __name__ == '__main__':
    main()
