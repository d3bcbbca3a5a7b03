from fifocache.nodes import HashNode, Record, TreeNode


def test_record_describe_short():
    record = Record(20, "John Doe2", "1234 Log St", "Oakland", "CA", "12345")
    assert record.describe() == "FIFO info from cacheManager:  key: 20"


def test_record_describe_verbose_contains_fields():
    record = Record(20, "John Doe2", "1234 Log St", "Oakland", "CA", "12345")
    text = record.describe(verbose=True)
    assert text.startswith("FIFO info from cacheManager.  key: 20")
    for part in ("name: John Doe2", ";address: 1234 Log St", "city: Oakland", "state: CA", "zip: 12345"):
        assert part in text


def test_record_defaults_are_empty():
    record = Record(7)
    assert (record.full_name, record.address, record.city, record.state, record.zip) == ("", "", "", "", "")


def test_hash_node_holds_record():
    record = Record(5, "Jane")
    node = HashNode(5, record)
    assert node.key == 5
    assert node.record is record


def test_tree_node_defaults():
    node = TreeNode(3)
    assert node.left is None and node.right is None
    assert node.number_of_nodes == 1
    assert node.height == 0
    assert node.record is None


def test_tree_node_children():
    left = TreeNode(1)
    right = TreeNode(9)
    parent = TreeNode(5, Record(5), 3, 1, left, right)
    assert parent.left.key == 1
    assert parent.right.key == 9
    assert parent.record.key == 5