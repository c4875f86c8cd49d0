"""
Example of extracting metadata from multiple images
"""

from pathlib import Path
from exifmeta_core import batch_extract


def main():
    # Find all images in a directory
    photo_dir = Path("./photos")
    
    if not photo_dir.exists():
        print(f"Error: Directory {photo_dir} not found")
        print("Please create a 'photos' directory with some images")
        return
    
    # Find all JPEG files
    images = list(photo_dir.glob("*.jpg")) + list(photo_dir.glob("*.jpeg"))
    
    if not images:
        print(f"No JPEG images found in {photo_dir}")
        return
    
    print(f"Found {len(images)} images")
    print("=" * 60)
    
    # Progress callback
    def on_progress(current, total, result):
        if result.success:
            metadata = result.data
            print(f"[{current}/{total}] ✓ {metadata.file_name}")
            if metadata.date_time.date_time_original:
                print(f"           Taken: {metadata.date_time.date_time_original}")
            if metadata.camera_label:
                print(f"           Camera: {metadata.camera_label}")
        else:
            print(f"[{current}/{total}] ✗ {result.error.kind.value}: {result.error.message}")
    
    # Extract from all images
    results = batch_extract(images, progress_callback=on_progress)
    
    # Summary
    print("=" * 60)
    successful = [r for r in results if r.success]
    failed = [r for r in results if not r.success]
    
    print(f"\nResults:")
    print(f"  Successful: {len(successful)}")
    print(f"  Failed:     {len(failed)}")
    
    # Show unique cameras
    cameras = set()
    for r in successful:
        if r.data.camera_label:
            cameras.add(r.data.camera_label)
    
    if cameras:
        print(f"\nCameras found:")
        for camera in sorted(cameras):
            print(f"  - {camera}")
    
    # Show GPS statistics
    with_gps = [r for r in successful if r.data.has_gps]
    if with_gps:
        print(f"\nPhotos with GPS: {len(with_gps)}/{len(successful)}")


if __name__ == "__main__":
    main()
