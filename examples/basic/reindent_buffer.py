"""Re-indent a whole NESFab buffer from its block structure."""

from nesfab_mode import Indenter

source = """\
fn main()
if ready
// wait for vblank
nmi_counter = 0
else
: attr
goto main
"""

print("\n".join(Indenter().indent_region(source.splitlines())))
