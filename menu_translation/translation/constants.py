# Translation module constants

SOURCE_LANGUAGE = "ja"

# Translation methods recorded on results and cache entries
METHOD_PASSTHROUGH = "passthrough"
METHOD_HYBRID = "hybrid"
METHOD_DEEPL_ONLY = "deepl_only"
METHOD_DICTIONARY_ONLY = "dictionary_only"
METHOD_FALLBACK_ORIGINAL = "fallback_original"
CACHED_METHOD_SUFFIX = "_cached"

# Prefix folded into the cache key when dictionary assist is off,
# so the MT-only variant never shares an entry with the hybrid one
MT_ONLY_CACHE_PREFIX = "deepl_only:"

# Texts this short are returned untouched
MAX_PASSTHROUGH_LENGTH = 2

TRANSLATION_FAILED = "Translation failed"
