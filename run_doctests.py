import sys
import doctest
if __name__ == "__main__":
    raise_on_error = True
    try:
        import annoadapters.annotier
        doctest.testmod(annoadapters.annotier, raise_on_error=raise_on_error)
        import annoadapters.annospan
        doctest.testmod(annoadapters.annospan, raise_on_error=raise_on_error)
        import annoadapters.annodoc
        doctest.testmod(annoadapters.annodoc, raise_on_error=raise_on_error)
        import annoadapters.offset_aligner
        doctest.testmod(annoadapters.offset_aligner, raise_on_error=raise_on_error)
        import annoadapters.iob
        doctest.testmod(annoadapters.iob, raise_on_error=raise_on_error)
        import annoadapters.resources
        doctest.testmod(annoadapters.resources, raise_on_error=raise_on_error)
        import annoadapters.pos_mapping
        doctest.testmod(annoadapters.pos_mapping, raise_on_error=raise_on_error)
        import annoadapters.tool_channel
        doctest.testmod(annoadapters.tool_channel, raise_on_error=raise_on_error)
        import annoadapters.brat
        doctest.testmod(annoadapters.brat, raise_on_error=raise_on_error)
    except doctest.UnexpectedException as e:
        print("Failed example:")
        print(e.example.lineno, ":", e.example.source)
        print(e.exc_info)
        sys.exit(1)
    except doctest.DocTestFailure as e:
        print("Failed example:")
        print(e.example.lineno, ":", e.example.source)
        print("Expected:", e.example.want)
        print("Got:", e.got)
        sys.exit(1)
