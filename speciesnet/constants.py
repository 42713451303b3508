"""Labels, sources and image sizes shared across the models."""

BLANK = "f1856211-cfb7-4a5b-9158-c0f72fd09ee6;;;;;;blank"
ANIMAL = "1f689929-883d-4dae-958c-3d57ab5b6c16;;;;;;animal"
HUMAN = "990ae9dd-7a59-4344-afcb-1b7b21368000;mammalia;primates;hominidae;homo;sapiens;human"
VEHICLE = "e2895ed5-780b-48f6-8a11-9e27cb594511;;;;;;vehicle"
UNKNOWN = (
    "f2efdae9-efb8-48fb-8a91-eccf79ab4ffb;no cv result;no cv result;"
    "no cv result;no cv result;no cv result;no cv result"
)

CLASSIFIER_IMAGE_WIDTH = 480
CLASSIFIER_IMAGE_HEIGHT = 480

SOURCE_DETECTOR = "detector"
SOURCE_CLASSIFIER = "classifier"

DETECTOR_IMAGE_HEIGHT = 1280