"""Static fishing reference data.

Tables that never change with API calls: the species behaviour catalogue
and the score bands/colors used to present bite scores.

Adding a new species:
1. Define a ``SpeciesProfile`` in ``reference/species.py``
2. Append it to ``DEFAULT_CATALOG``
"""

from bite_forecast.reference.quality import GOOD_SCORE_THRESHOLD as GOOD_SCORE_THRESHOLD
from bite_forecast.reference.quality import QUALITY_COLORS as QUALITY_COLORS
from bite_forecast.reference.quality import QualityLabel as QualityLabel
from bite_forecast.reference.quality import quality_color as quality_color
from bite_forecast.reference.species import DEFAULT_CATALOG as DEFAULT_CATALOG
from bite_forecast.reference.species import SpeciesCatalog as SpeciesCatalog
from bite_forecast.reference.species import SpeciesProfile as SpeciesProfile
