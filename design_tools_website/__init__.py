"""Design tools catalog: content authoring CLI and website."""
