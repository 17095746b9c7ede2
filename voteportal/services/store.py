class VoteRecordStore:
    def __init__(self):
        self._records = []

    def append(self, record):
        self._records.append(record)
        return record

    def records(self):
        return tuple(self._records)

    def for_category(self, category_id):
        return [record for record in self._records if record.category_id == category_id]

    def __iter__(self):
        return iter(tuple(self._records))

    def __len__(self):
        return len(self._records)

    def __bool__(self):
        return bool(self._records)
