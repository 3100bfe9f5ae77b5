import threading

from lvhost.mapper import Mapper

URI_A = "http://lv2plug.in/ns/ext/atom#Chunk"
URI_B = "http://lv2plug.in/ns/ext/atom#Sequence"


def test_round_trip():
    mapper = Mapper()
    urid = mapper.map_uri(URI_A)
    assert urid > 0
    assert mapper.unmap_uri(urid) == URI_A


def test_mapping_is_stable():
    mapper = Mapper()
    first = mapper.map_uri(URI_A)
    mapper.map_uri(URI_B)
    assert mapper.map_uri(URI_A) == first


def test_distinct_uris_distinct_urids():
    mapper = Mapper()
    assert mapper.map_uri(URI_A) != mapper.map_uri(URI_B)


def test_unmap_unknown_returns_none():
    mapper = Mapper()
    assert mapper.unmap_uri(0) is None
    assert mapper.unmap_uri(7) is None


def test_concurrent_mapping_is_consistent():
    mapper = Mapper()
    uris = [f"urn:test:{n}" for n in range(50)]
    results = []
    results_lock = threading.Lock()

    def worker():
        local = {uri: mapper.map_uri(uri) for uri in uris}
        with results_lock:
            results.append(local)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert all(result == results[0] for result in results)
    assert sorted(results[0].values()) == list(range(1, len(uris) + 1))
    for uri, urid in results[0].items():
        assert mapper.unmap_uri(urid) == uri